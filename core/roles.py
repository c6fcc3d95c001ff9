from enum import Enum


class UserRole(str, Enum):
    """Roles carried in access tokens"""
    ADMIN = "admin"  # every team
    COACH = "coach"  # only the teams listed in the token

    @classmethod
    def get_hierarchy(cls) -> dict:
        """Higher roles include the permissions of lower ones"""
        return {
            cls.ADMIN: [cls.ADMIN, cls.COACH],
            cls.COACH: [cls.COACH],
        }

    @classmethod
    def has_permission(cls, user_role: str, required_role: str) -> bool:
        try:
            role = cls(user_role)
            required = cls(required_role)
        except ValueError:
            return False
        return required in cls.get_hierarchy().get(role, [])
