from .store import ConfigStore, default_config_root, is_user_dir_valid

__all__ = ["ConfigStore", "default_config_root", "is_user_dir_valid"]
