from .exceptions import (
    DomainException as DomainException,
)
from .exceptions import (
    IllegalStateException as IllegalStateException,
)
from .exceptions import (
    InvalidArgumentException as InvalidArgumentException,
)
