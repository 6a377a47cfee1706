import enum

class ComplaintStatus(str, enum.Enum):
    PENDING = "pending"
    IN_PROGRESS = "in-progress"
    RESOLVED = "resolved"
    CLOSED = "closed"


# Customers may no longer reply once a complaint reaches these
REPLY_LOCKED_STATUSES = {ComplaintStatus.RESOLVED, ComplaintStatus.CLOSED}
