from .id_generator import IdGenerator as IdGenerator
from .id_generator import SequentialIdGenerator as SequentialIdGenerator
