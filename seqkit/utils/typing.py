from typing_extensions import TypeVar

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)
IndexT = TypeVar("IndexT")
