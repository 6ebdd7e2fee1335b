import logging

from openai import AzureOpenAI, OpenAI

from app_settings import Settings

logger = logging.getLogger(__name__)


def create_chat_client(settings: Settings):
    """
    Build the chat completion client for the configured provider.
    Retries are disabled: a failed call goes straight to the template fallback.
    """
    if settings.use_azure:
        logger.info(f"🔧 Using Azure OpenAI endpoint {settings.azure_api_base} (deployment: {settings.model_name})")
        return AzureOpenAI(
            api_key=settings.openai_api_key,
            azure_endpoint=settings.azure_api_base,
            api_version=settings.azure_api_version,
            max_retries=0,
        )

    return OpenAI(
        api_key=settings.openai_api_key,
        base_url=settings.openai_base_url,
        max_retries=0,
    )
