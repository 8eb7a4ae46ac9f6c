from .entity import Entity as Entity
from .exception import (
    DomainException as DomainException,
)
from .exception import (
    IllegalStateException as IllegalStateException,
)
from .exception import (
    InvalidArgumentException as InvalidArgumentException,
)
from .id_generator import (
    IdGenerator as IdGenerator,
)
from .id_generator import (
    SequentialIdGenerator as SequentialIdGenerator,
)
from .repository import Repository as Repository
from .value_object import (
    IsoDateTime as IsoDateTime,
)
