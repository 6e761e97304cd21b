from enum import StrEnum


class CustomerRole(StrEnum):
    CUSTOMER = 'CUSTOMER'
    ADMIN = 'ADMIN'
