from pydantic import BaseModel

from generator.app.domain.models import OgpData


class OgpMetadataResponse(BaseModel):
    url: str
    title: str
    description: str | None = None
    image: str | None = None
    site_name: str | None = None

    @classmethod
    def from_domain(cls, data: OgpData) -> "OgpMetadataResponse":
        return cls(
            url=data.url,
            title=data.title,
            description=data.description,
            image=data.image,
            site_name=data.site_name,
        )
