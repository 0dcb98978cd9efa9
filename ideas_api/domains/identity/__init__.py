from ideas_api.domains.identity.schemas import UserClaim

__all__ = ["UserClaim"]
