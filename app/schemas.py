from pydantic import BaseModel, ConfigDict, Field, HttpUrl


class VerificationRequest(BaseModel):
    model_config = ConfigDict(coerce_numbers_to_str=True)

    imageUrl: HttpUrl
    productName: str = Field(min_length=1)


class ImagePart(BaseModel):
    data: str
    mimeType: str

    def to_inline_data(self) -> dict:
        return {"inline_data": {"mime_type": self.mimeType, "data": self.data}}


class VerificationResult(BaseModel):
    isMatch: bool
    aiResponse: str
