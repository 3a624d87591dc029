from flowershop.domain.enums.media_owner import MediaOwner
__all__ = [
    "MediaOwner",
]
