# Users
from complaintdesk.models.users.user_models import User

# Support
from complaintdesk.models.support.complaint_models import Complaint
