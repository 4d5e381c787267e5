"""
Clock
Wall-clock source in unix epoch seconds
"""

import time


class Clock:
    """System clock"""

    def now(self) -> int:
        """Current time as whole unix epoch seconds"""
        return int(time.time())
