from pydantic_settings import BaseSettings

from .yaml_config import get_defaults

_defaults = get_defaults()


class Settings(BaseSettings):
    model_config = {"env_prefix": "DOMAIN_VALIDATOR_"}

    # Input files
    tlds_path: str = _defaults.get("tlds_path", "tlds-alpha-by-domain.txt")
    domains_path: str = _defaults.get("domains_path", "")

    # Loader behavior
    debug: bool = _defaults.get("debug", False)
    skip_blank_tlds: bool = _defaults.get("skip_blank_tlds", True)


settings = Settings()
