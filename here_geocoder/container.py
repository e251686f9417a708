"""Dependency injection container.

Wires the HTTP transport and the HERE geocoder together so the CLI (and
tests) can replace the transport without touching the geocoder.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional

from .config import AppConfig, get_config


@dataclass
class Container:
    """Lazily built, cached instances keyed by port type.

    Usage:
        container = Container.create_default()
        container.register(HttpTransportPort, lambda: StaticResponseTransport(body))
        geocoder = container.resolve(GeocoderPort)

    Attributes:
        config: Application configuration
    """

    config: AppConfig = field(default_factory=get_config)

    _factories: Dict[type[Any], Callable[[], Any]] = field(
        default_factory=dict, repr=False
    )
    _instances: Dict[type[Any], Any] = field(default_factory=dict, repr=False)
    _lock: threading.RLock = field(default_factory=threading.RLock, repr=False)

    def register(self, port_type: type[Any], factory: Callable[[], Any]) -> None:
        """Bind a port to a factory, dropping any instance already built for it."""
        with self._lock:
            self._factories[port_type] = factory
            self._instances.pop(port_type, None)

    def resolve(self, port_type: type[Any]) -> Any:
        """Return the instance bound to a port, building it on first use.

        Raises:
            KeyError: If nothing is bound to the port.
        """
        with self._lock:
            if port_type not in self._instances:
                try:
                    factory = self._factories[port_type]
                except KeyError:
                    raise KeyError(f"No binding for {port_type.__name__}") from None
                self._instances[port_type] = factory()
            return self._instances[port_type]

    @classmethod
    def create_default(
        cls, config: Optional[AppConfig] = None, api_key: Optional[str] = None
    ) -> Container:
        """Bind the geopy transport and the HERE geocoder.

        The geocoder is built lazily, so a missing API key only fails
        when GeocoderPort is resolved.

        Args:
            config: Optional configuration override.
            api_key: Optional API key overriding HERE_API_KEY.
        """
        from .adapters.geocoding import HereGeocoderAdapter
        from .adapters.http import GeopyHttpTransport
        from .ports.geocoding import GeocoderPort
        from .ports.http import HttpTransportPort

        config = config or get_config()
        container = cls(config=config)

        container.register(HttpTransportPort, lambda: GeopyHttpTransport(config.http))
        container.register(
            GeocoderPort,
            lambda: HereGeocoderAdapter(
                transport=container.resolve(HttpTransportPort),
                api_key=api_key,
                config=config.here,
            ),
        )
        return container
