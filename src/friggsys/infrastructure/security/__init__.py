from friggsys.infrastructure.security.bcrypt_password_encoder import (
    BcryptPasswordEncoder,
)

__all__ = ["BcryptPasswordEncoder"]
