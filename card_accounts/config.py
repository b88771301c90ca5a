"""
Configuration Management Module

Provides centralized configuration using pydantic-settings for environment-based configuration.
"""

from pydantic_settings import BaseSettings


class AccountsConfig(BaseSettings):
    """Card accounts configuration"""
    
    # Logging configuration
    log_level: str = "INFO"
    log_format: str = "json"  # json or text
    
    # Identifier configuration
    account_number_length: int = 20
    card_number_length: int = 16
    
    # Display configuration
    currency_symbol: str = "₽"
    
    # Demo configuration
    default_credit_limit: str = "10000"
    
    class Config:
        env_prefix = "CARD_ACCOUNTS_"
        env_file = ".env"
        case_sensitive = False


# Global configuration instance
config = AccountsConfig()


def get_config() -> AccountsConfig:
    """Get global configuration instance"""
    return config


def reload_config() -> AccountsConfig:
    """Reload configuration from environment"""
    global config
    config = AccountsConfig()
    return config
