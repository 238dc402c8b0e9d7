"""
Constants for the SRFax client.

Action verbs, endpoint and the enumerated values accepted by SRFax request
fields.
"""

DEFAULT_URL = "https://www.srfax.com/SRF_SecWebSvc.php"
DEFAULT_TIMEOUT = 30.0

# Every POST request carries exactly one of these in "action"
ACTION_QUEUE_FAX = "Queue_Fax"
ACTION_GET_FAX_STATUS = "Get_FaxStatus"
ACTION_GET_MULTI_FAX_STATUS = "Get_MultiFaxStatus"
ACTION_GET_FAX_INBOX = "Get_Fax_Inbox"
ACTION_GET_FAX_OUTBOX = "Get_Fax_Outbox"
ACTION_FORWARD_FAX = "Forward_Fax"
ACTION_RETRIEVE_FAX = "Retrieve_Fax"
ACTION_UPDATE_VIEWED_STATUS = "Update_Viewed_Status"
ACTION_DELETE_FAX = "Delete_Fax"
ACTION_STOP_FAX = "Stop_Fax"
ACTION_GET_FAX_USAGE = "Get_Fax_Usage"

# sDirection
INBOUND = "IN"
OUTBOUND = "OUT"
DIRECTIONS = (INBOUND, OUTBOUND)

# sFaxType
SINGLE = "SINGLE"
BROADCAST = "BROADCAST"
FAX_TYPES = (SINGLE, BROADCAST)

# sMarkasViewed / sIncludeSubUsers
YES = "Y"
NO = "N"

# sFaxFormat
PDF = "PDF"
TIF = "TIF"
FAX_FORMATS = (PDF, TIF)

# sPeriod
PERIOD_ALL = "ALL"
PERIOD_RANGE = "RANGE"
PERIODS = (PERIOD_ALL, PERIOD_RANGE)

# sViewedStatus
VIEWED_STATUSES = ("ALL", "READ", "UNREAD")

# sCoverPage
COVER_PAGES = ("Basic", "Standard", "Company", "Personal")

MAX_RETRIES = 6

CALLER_ID_DIGITS = 10
FAX_NUMBER_DIGITS = 11

# Date layouts for strptime
RANGE_DATE_FORMAT = "%Y%m%d"
QUEUE_DATE_FORMAT = "%Y-%m-%d"
QUEUE_TIME_FORMAT = "%H:%M"
