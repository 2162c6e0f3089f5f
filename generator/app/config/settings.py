from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from generator.app.domain.models import RenderOptions


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    fetch_connect_timeout_seconds: float = Field(5.0, validation_alias="FETCH_CONNECT_TIMEOUT_SECONDS")
    fetch_read_timeout_seconds: float = Field(15.0, validation_alias="FETCH_READ_TIMEOUT_SECONDS")
    fetch_user_agent: str = Field("", validation_alias="FETCH_USER_AGENT")
    fetch_follow_redirects: bool = Field(True, validation_alias="FETCH_FOLLOW_REDIRECTS")

    # Render defaults; an empty path disables the template or font.
    ogp_width: int = Field(1200, gt=0, validation_alias="OGP_WIDTH")
    ogp_height: int = Field(630, gt=0, validation_alias="OGP_HEIGHT")
    ogp_template_path: str = Field("./assets/ogp-template.png", validation_alias="OGP_TEMPLATE_PATH")
    ogp_font_path: str = Field("./assets/NotoSansJP-Bold.ttf", validation_alias="OGP_FONT_PATH")
    ogp_font_size: float = Field(48, gt=0, validation_alias="OGP_FONT_SIZE")
    ogp_font_family: str = Field("NotoSansJP", validation_alias="OGP_FONT_FAMILY")
    ogp_text_color: str = Field("#000000", validation_alias="OGP_TEXT_COLOR")
    ogp_max_width: float = Field(800, gt=0, validation_alias="OGP_MAX_WIDTH")
    ogp_text_shadow: bool = Field(False, validation_alias="OGP_TEXT_SHADOW")

    def render_options(self) -> RenderOptions:
        return RenderOptions(
            width=self.ogp_width,
            height=self.ogp_height,
            template_path=self.ogp_template_path or None,
            font_path=self.ogp_font_path or None,
            font_size=self.ogp_font_size,
            font_family=self.ogp_font_family,
            text_color=self.ogp_text_color,
            max_width=self.ogp_max_width,
            text_shadow=self.ogp_text_shadow,
        )

    def default_headers(self) -> dict[str, str] | None:
        if self.fetch_user_agent:
            return {"User-Agent": self.fetch_user_agent}
        return None
