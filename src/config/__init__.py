from config.settings import DiscordConfig, Settings, SystemConfig, TelegramConfig

__all__ = ["DiscordConfig", "Settings", "SystemConfig", "TelegramConfig"]
