"""Configuration objects for choosing orientation kernels."""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Type

from .kernels import Kernel, get_kernel

@dataclass
class KernelConfig:
    """Which kernel a caller should pass to the primitives.

    Attributes
    ----------
    kernel : str
        Registered kernel name, ``'float'`` (adaptive, exact sign) or
        ``'trivial'`` (plain float determinant).
    """
    kernel: str = 'float'

    def resolve(self) -> Type[Kernel]:
        return get_kernel(self.kernel)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'KernelConfig':
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**known)


__all__ = ['KernelConfig']
