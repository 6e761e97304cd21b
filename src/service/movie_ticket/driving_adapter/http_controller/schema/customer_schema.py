"""
Customer API Schemas - Pydantic models for request/response
"""

from datetime import datetime
import re
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, SecretStr, field_validator

from src.service.movie_ticket.domain.entity.customer_entity import CustomerEntity
from src.service.movie_ticket.domain.enum.customer_role import CustomerRole


_PHONE_PATTERN = re.compile(r'^\d{10}$')


class RegisterCustomerRequest(BaseModel):
    model_config = {
        'json_schema_extra': {
            'example': {
                'email': 'jane.doe@example.com',
                'password': 'Secret123',
                'phone': '0987654321',
                'first_name': 'Jane',
                'last_name': 'Doe',
            }
        }
    }

    email: EmailStr = Field(..., max_length=100)
    password: SecretStr = Field(..., min_length=8, max_length=100)
    phone: str
    first_name: str = Field(..., min_length=2, max_length=100)
    last_name: str = Field(..., min_length=2, max_length=100)

    @field_validator('password')
    @classmethod
    def validate_password_strength(cls, v: SecretStr) -> SecretStr:
        value = v.get_secret_value()
        if not (
            any(c.isupper() for c in value)
            and any(c.islower() for c in value)
            and any(c.isdigit() for c in value)
        ):
            raise ValueError(
                'Password must contain at least one uppercase letter, one lowercase letter and one digit'
            )
        return v

    @field_validator('phone')
    @classmethod
    def validate_phone(cls, v: str) -> str:
        if not _PHONE_PATTERN.match(v):
            raise ValueError('Phone must be exactly 10 digits')
        return v


class LoginRequest(BaseModel):
    model_config = {
        'json_schema_extra': {'example': {'email': 'jane.doe@example.com', 'password': 'Secret123'}}
    }

    email: EmailStr
    password: SecretStr = Field(..., min_length=1, max_length=100)


class CustomerResponse(BaseModel):
    model_config = {
        'from_attributes': True,
        'json_schema_extra': {
            'example': {
                'id': 1,
                'email': 'jane.doe@example.com',
                'phone': '0987654321',
                'first_name': 'Jane',
                'last_name': 'Doe',
                'role': 'CUSTOMER',
                'enabled': True,
                'created_at': '2025-01-10T10:30:00',
            }
        },
    }

    id: int
    email: str
    phone: str
    first_name: str
    last_name: str
    role: CustomerRole
    enabled: bool
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, customer: CustomerEntity) -> 'CustomerResponse':
        return cls(
            id=customer.id or 0,
            email=customer.email,
            phone=customer.phone,
            first_name=customer.first_name,
            last_name=customer.last_name,
            role=customer.role,
            enabled=customer.enabled,
            created_at=customer.created_at,
        )
