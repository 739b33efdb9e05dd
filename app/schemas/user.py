from pydantic import BaseModel, EmailStr
from pydantic.alias_generators import to_camel
from typing import Literal

CurrencyCode = Literal["INR", "USD", "EUR", "GBP"]

class CamelModel(BaseModel):
    class Config:
        alias_generator = to_camel
        populate_by_name = True

class User(CamelModel):
    id: int
    full_name: str
    default_currency: str = "USD"

    def __eq__(self, other):
        if isinstance(other, User):
            return self.id == other.id
        return NotImplemented

    def __hash__(self):
        return hash(self.id)

class SignupRequest(CamelModel):
    full_name: str
    email: EmailStr
    password: str
    default_currency: CurrencyCode = "INR"

class LoginRequest(CamelModel):
    email: EmailStr
    password: str

class AuthOut(CamelModel):
    message: str
    user: User
