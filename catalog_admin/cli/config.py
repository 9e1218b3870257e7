"""
Configuration management for the catalog admin CLI.
Handles loading and validating configuration from environment variables and files.
Credentials are never stored in code; they come from the environment or a .env file.
"""

import os
from dataclasses import dataclass, field
from typing import Optional
from pathlib import Path
from dotenv import load_dotenv

@dataclass
class Config:
    """Configuration settings for the catalog admin CLI."""
    
    # Database settings
    database_url: str
    
    # Object storage settings
    storage_root: Path = field(default_factory=lambda: Path('media'))
    storage_public_url: Optional[str] = None
    storage_bucket: str = 'product'
    
    # Logging settings
    log_level: str = 'INFO'
    log_dir: Optional[Path] = None
    
    # Output settings
    output_format: str = 'text'  # text, json, csv
    
    # Import settings
    batch_size: int = field(default=100)
    
    @classmethod
    def from_env(cls, env_file: Optional[Path] = None) -> 'Config':
        """Create configuration from environment variables.
        
        Args:
            env_file: Optional path to .env file
            
        Returns:
            Config: Configuration instance
            
        Raises:
            ValueError: If required environment variables are missing
        """
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv()
            
        database_url = os.getenv('DATABASE_URL')
        if not database_url:
            raise ValueError("DATABASE_URL environment variable is required")
            
        return cls(
            database_url=database_url,
            storage_root=Path(os.getenv('STORAGE_ROOT', 'media')),
            storage_public_url=os.getenv('STORAGE_PUBLIC_URL') or None,
            storage_bucket=os.getenv('STORAGE_BUCKET', 'product'),
            log_level=os.getenv('LOG_LEVEL', 'INFO'),
            log_dir=Path(os.getenv('LOG_DIR')) if os.getenv('LOG_DIR') else None,
            output_format=os.getenv('OUTPUT_FORMAT', 'text'),
            batch_size=int(os.getenv('BATCH_SIZE', '100'))
        )
    
    @property
    def public_base_url(self) -> str:
        """Public URL prefix of the storage root."""
        if self.storage_public_url:
            return self.storage_public_url
        return self.storage_root.resolve().as_uri()
    
    def validate(self) -> bool:
        """Validate configuration settings.
        
        Returns:
            bool: True if configuration is valid
        """
        if self.log_dir and not self.log_dir.exists():
            try:
                self.log_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ValueError(f"Failed to create log directory: {e}")
        
        if self.batch_size <= 0:
            raise ValueError("batch_size must be positive")
        
        if not self.storage_bucket:
            raise ValueError("storage_bucket must not be empty")
            
        valid_formats = ['text', 'json', 'csv']
        if self.output_format not in valid_formats:
            raise ValueError(f"output_format must be one of: {', '.join(valid_formats)}")
            
        return True
