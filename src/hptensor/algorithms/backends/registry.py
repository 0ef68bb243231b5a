"""
hptensor.algorithms.backends.registry
=====================================

Immutable table of the known algebra backends and name/alias resolution.

Unknown names do not raise: they resolve to the registry default, matching
the permissive selection policy of the public interface.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping, Optional, Tuple, Type, Union

from hptensor.algorithms.backends.base import _AlgebraBackend
from hptensor.algorithms.backends.symengine_backend import _SymEngineBackend
from hptensor.algorithms.backends.sympy_backend import _SymPyBackend
from hptensor.algorithms.utils.config import DEFAULT_BACKEND
from hptensor.utils.log_config import logger


@dataclass(frozen=True)
class BackendRegistry:
    """Read-only mapping of backend names to aliases and factories.

    Parameters
    ----------
    factories : Mapping[str, Callable[[], _AlgebraBackend]]
        Canonical backend name to a zero-argument factory.
    aliases : Mapping[str, Tuple[str, ...]]
        Canonical backend name to its accepted aliases.
    default : str
        Canonical name used for ``None`` and unrecognized names.
    """
    factories: Mapping[str, Callable[[], _AlgebraBackend]]
    aliases: Mapping[str, Tuple[str, ...]]
    default: str
    _instances: Mapping[str, _AlgebraBackend] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.default not in self.factories:
            raise ValueError(f"Default backend '{self.default}' is not registered: {sorted(self.factories)}")
        object.__setattr__(self, "factories", MappingProxyType(dict(self.factories)))
        object.__setattr__(self, "aliases", MappingProxyType(
            {name: tuple(self.aliases.get(name, ())) for name in self.factories}
        ))
        object.__setattr__(self, "_instances", MappingProxyType(
            {name: factory() for name, factory in self.factories.items()}
        ))

    @classmethod
    def from_backends(cls, backends: Tuple[Type[_AlgebraBackend], ...], default: str) -> "BackendRegistry":
        """Build a registry from backend classes using their ``name``/``aliases``."""
        return cls(
            factories={b.name: b for b in backends},
            aliases={b.name: b.aliases for b in backends},
            default=default,
        )

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self.factories)

    def resolve(self, name: Optional[str]) -> str:
        """Return the canonical backend name for *name* or one of its aliases."""
        if name is not None:
            for key, aliases in self.aliases.items():
                if name == key or name in aliases:
                    return key
            logger.debug(f"Unknown backend '{name}', falling back to '{self.default}'")
        return self.default

    def get(self, name: Optional[str]) -> _AlgebraBackend:
        return self._instances[self.resolve(name)]


DEFAULT_REGISTRY = BackendRegistry.from_backends(
    (_SymEngineBackend, _SymPyBackend), default=DEFAULT_BACKEND
)

BackendLike = Union[str, _AlgebraBackend, None]


def resolve_backend(name: Optional[str], registry: BackendRegistry = DEFAULT_REGISTRY) -> str:
    """Return the canonical backend name for *name*, or *registry*'s default."""
    return registry.resolve(name)


def get_backend(backend: BackendLike = None, registry: BackendRegistry = DEFAULT_REGISTRY) -> _AlgebraBackend:
    """Return a backend instance from a name, an alias, or an instance."""
    if isinstance(backend, _AlgebraBackend):
        return backend
    return registry.get(backend)
