"""Ports the application layer depends on but does not implement."""

from friggsys.application.ports.password_encoder import PasswordEncoder

__all__ = ["PasswordEncoder"]
