from pydantic import BaseModel, ConfigDict


class BadRequestResponse(BaseModel):
    message: str


class NotFoundResponse(BaseModel):
    message: str = "Not Found"


class ConflictResponse(BaseModel):
    message: str


class ValidationErrorResponseDetail(BaseModel):
    field: str
    message: str


class ValidationErrorResponse(BaseModel):
    model_config = ConfigDict(
        from_attributes=True,
        json_schema_extra={
            "example": {
                "message": "Validation error on request parameters.",
                "errors": [
                    {
                        "field": "sort",
                        "message": "Value error, sort must be ASC or DESC",
                    },
                ],
            }
        },
    )

    message: str
    errors: list[ValidationErrorResponseDetail]


class InternalServerErrorResponse(BaseModel):
    detail: str
