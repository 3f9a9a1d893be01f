from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConvertRequest(BaseModel):
	amount: float = Field(..., description='Amount in the selected source currency')

	model_config = ConfigDict(json_schema_extra={'example': {'amount': 100.00}})


class SelectCurrencyRequest(BaseModel):
	code: str = Field(..., min_length=3, max_length=5)

	model_config = ConfigDict(json_schema_extra={'example': {'code': 'USD'}})

	@field_validator('code')
	@classmethod
	def uppercase_currency(cls, v: str):
		return v.upper()


class ValidateAmountRequest(BaseModel):
	text: str = Field(..., description='Raw amount as typed by the user')
