from decimal import Decimal

from pydantic import BaseModel, Field, model_validator

from src.domain.entities import ADDRESS_CAPACITY, FULL_NAME_CAPACITY


class AmountRules(BaseModel):
    max_length: int = Field(default=15, gt=0)
    min_amount: Decimal = Decimal("0.01")
    max_amount: Decimal = Decimal("1000000.00")
    currency_symbol: str = "£"

    @model_validator(mode="after")
    def check_range(self) -> "AmountRules":
        if self.min_amount <= 0:
            raise ValueError("min_amount must be positive")
        if self.min_amount > self.max_amount:
            raise ValueError("min_amount must not exceed max_amount")
        return self


class FieldRules(BaseModel):
    full_name_capacity: int = Field(default=FULL_NAME_CAPACITY, gt=1, le=FULL_NAME_CAPACITY)
    address_capacity: int = Field(default=ADDRESS_CAPACITY, gt=1, le=ADDRESS_CAPACITY)


class SeedAccount(BaseModel):
    account_number: str
    full_name: str
    address: str
    balance_pence: int
    phone: str = ""


class ServerRules(BaseModel):
    host: str = "127.0.0.1"
    port: int = Field(default=8080, gt=0, lt=65536)
    title: str = "Security Thinking Bank"


class LoggingRules(BaseModel):
    level: str = "INFO"
    security_logger: str = "security"


class Rules(BaseModel):
    amounts: AmountRules = Field(default_factory=AmountRules)
    fields: FieldRules = Field(default_factory=FieldRules)
    accounts: list[SeedAccount] = Field(default_factory=list)
    server: ServerRules = Field(default_factory=ServerRules)
    logging: LoggingRules = Field(default_factory=LoggingRules)
