from friggsys.application.services.user_loader import get_user_or_raise

__all__ = ["get_user_or_raise"]
