"""Generic registry with decorator pattern for pluggable components."""

from typing import TypeVar, Generic, Callable, Any

from whisper_diary.core.exceptions import RegistryError

T = TypeVar("T")


class Registry(Generic[T]):
    """
    Named collection of component classes.
    
    Usage:
        FormatterRegistry = Registry[BaseFormatter]("formatters")
        
        @FormatterRegistry.register("csv")
        class TableFormatter(BaseFormatter):
            ...
        
        formatter = FormatterRegistry.create("csv", frame_rate=30)
    """
    
    def __init__(self, name: str):
        self.name = name
        self._registry: dict[str, type[T]] = {}
    
    def register(self, key: str) -> Callable[[type[T]], type[T]]:
        """Decorator to register a component class."""
        def decorator(cls: type[T]) -> type[T]:
            if key in self._registry:
                raise RegistryError(f"{self.name}: '{key}' already registered")
            self._registry[key] = cls
            return cls
        return decorator
    
    def get(self, key: str) -> type[T]:
        """Get the class (not instance) by key."""
        if key not in self._registry:
            available = ", ".join(self._registry) or "none"
            raise RegistryError(f"{self.name}: '{key}' not found. Available: {available}")
        return self._registry[key]
    
    def create(self, key: str, **kwargs: Any) -> T:
        """Instantiate a registered component by key."""
        return self.get(key)(**kwargs)
    
    def list(self) -> list[str]:
        """Registered keys in registration order."""
        return list(self._registry)
    
    def __contains__(self, key: str) -> bool:
        return key in self._registry
    
    def __repr__(self) -> str:
        return f"Registry({self.name}, components={self.list()})"
