DEFAULT_PASSWORD = 'Password123'

ADMIN_EMAIL = 'admin@example.com'
ADMIN_FIRST_NAME = 'Admin'

CUSTOMER_EMAIL = 'jane.doe@example.com'
CUSTOMER_FIRST_NAME = 'Jane'

ANOTHER_CUSTOMER_EMAIL = 'john.roe@example.com'
ANOTHER_CUSTOMER_FIRST_NAME = 'John'

DEFAULT_LAST_NAME = 'Tester'
DEFAULT_PHONE = '0987654321'

TEST_CARD_NUMBER = '4111 1111 1111 1234'
TEST_CARD_HOLDER = 'Jane Tester'
