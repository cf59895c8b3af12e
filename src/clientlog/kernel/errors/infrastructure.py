"""Infrastructure errors – failures raised by transports."""

from __future__ import annotations

from typing import Any

from clientlog.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not an API misuse."""

    default_code = "infrastructure_error"


class TransportError(InfrastructureError):
    """A single transport failed during ``write``, ``flush`` or ``dispose``."""

    default_code = "transport_error"

    def __init__(
        self,
        transport: str,
        operation: str,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            message or f"Transport '{transport}' failed during {operation}",
            **kwargs,
        )
        self.transport = transport
        self.operation = operation

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["transport"] = self.transport
        payload["operation"] = self.operation
        return payload


class TransportDispatchError(TransportError):
    """One or more transports failed while the same batch was fanned out.

    Every transport was still attempted; :attr:`errors` holds one
    :class:`TransportError` per failing transport, in transport order.
    """

    default_code = "transport_dispatch_error"

    def __init__(self, operation: str, errors: list[TransportError]) -> None:
        names = ", ".join(e.transport for e in errors)
        super().__init__(
            names,
            operation,
            f"{len(errors)} transport(s) failed during {operation}: {names}",
            cause=errors[0] if errors else None,
        )
        self.errors = errors

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["errors"] = [e.to_dict() for e in self.errors]
        return payload


__all__ = [
    "InfrastructureError",
    "TransportDispatchError",
    "TransportError",
]
