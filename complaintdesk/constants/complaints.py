# Customer replies allowed in a row before an admin has to answer
MAX_CONSECUTIVE_CUSTOMER_REPLIES = 3

MIN_RATING = 1
MAX_RATING = 5

RECENT_COMPLAINTS_LIMIT = 5
TOP_RATED_LIMIT = 3
