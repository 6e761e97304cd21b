# Customer
CUSTOMER_BASE = '/api/customer'
CUSTOMER_LOGIN = f'{CUSTOMER_BASE}/login'
CUSTOMER_ME = f'{CUSTOMER_BASE}/me'
CUSTOMER_GET = f'{CUSTOMER_BASE}/{{customer_id}}'

# Movie
MOVIE_BASE = '/api/movie'
MOVIE_GET = f'{MOVIE_BASE}/{{movie_id}}'
MOVIE_IMAGE = f'{MOVIE_BASE}/image'

# Ticket purchase
PURCHASE_BASE = '/api/purchase'
PURCHASE_GET = f'{PURCHASE_BASE}/{{purchase_id}}'
PURCHASE_BY_CONFIRMATION_CODE = f'{PURCHASE_BASE}/confirmation/{{confirmation_code}}'
PURCHASE_BY_CUSTOMER = f'{PURCHASE_BASE}/customer/{{customer_id}}'
PURCHASE_BY_MOVIE = f'{PURCHASE_BASE}/movie/{{movie_id}}'
