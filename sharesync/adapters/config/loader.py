"""
Configuration loader with priority: CLI > env > TOML > defaults
"""
import os
import tomllib
from pathlib import Path
from typing import Dict, Any, Optional

from ...core.constants import ENV_PREFIX
from ...core.exceptions import ConfigError


class ConfigLoader:
    """Configuration loader with priority support"""
    
    # Environment variable suffix -> config key
    ENV_MAPPINGS = {
        "LOCAL_HOST": "local_host",
        "MOUNT_ROOT": "mount_root",
        "RESULT_LOG": "result_log",
        "TARGETS_FILE": "targets_file",
        "SSH_HOSTS": "ssh_hosts",
    }
    BOOL_KEYS = {"ssh_hosts"}
    
    def __init__(self, env_prefix: str = ENV_PREFIX):
        self._env_prefix = env_prefix
    
    def load_toml(self, path: Path) -> Dict[str, Any]:
        """Load TOML configuration file"""
        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")
        
        try:
            return tomllib.loads(path.read_text(encoding='utf-8'))
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Failed to parse TOML configuration: {e}") from e
    
    def load_env(self) -> Dict[str, Any]:
        """Load configuration from environment variables"""
        config = {}
        
        for suffix, config_key in self.ENV_MAPPINGS.items():
            value = os.getenv(self._env_prefix + suffix)
            if value:
                if config_key in self.BOOL_KEYS:
                    config[config_key] = self._convert_bool(value)
                else:
                    config[config_key] = value
        
        return config
    
    def _convert_bool(self, value: str) -> bool:
        """Convert string value to boolean"""
        if value.lower() in ("true", "yes", "1"):
            return True
        if value.lower() in ("false", "no", "0"):
            return False
        raise ConfigError(f"Expected a boolean, got: {value}")
    
    def merge_configs(self, *configs: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge multiple configurations with priority.
        Later configs override earlier ones.
        """
        result = {}
        for config in configs:
            result.update(config)
        return result
    
    def load(
        self,
        toml_path: Optional[Path] = None,
        cli_overrides: Optional[Dict[str, Any]] = None,
        use_env: bool = True,
    ) -> Dict[str, Any]:
        """
        Load configuration with priority: CLI > env > TOML
        
        Args:
            toml_path: Path to TOML configuration file
            cli_overrides: CLI parameter overrides (None values are ignored)
            use_env: Whether to load from environment variables
        
        Returns:
            Merged configuration dictionary
        """
        configs = []
        
        # 1. Load TOML if provided
        if toml_path:
            configs.append(self.load_toml(toml_path))
        
        # 2. Load environment variables
        if use_env:
            env_config = self.load_env()
            if env_config:
                configs.append(env_config)
        
        # 3. Apply CLI overrides (highest priority)
        if cli_overrides:
            configs.append({k: v for k, v in cli_overrides.items() if v is not None})
        
        # Merge all configs
        return self.merge_configs(*configs)
