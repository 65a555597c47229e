# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Configuration management for the manifest validator."""

import os
import logging
from dataclasses import dataclass, replace
from typing import Mapping, Optional

from .utils.logging_utils import configure_split_stream_logging


@dataclass(frozen=True)
class ValidatorConfig:
    """Configuration class for a validation run.

    Components receive this value explicitly; only :meth:`from_env` reads the
    process environment.
    """
    ci: bool = False
    log_level: str = "WARNING"
    print_level: str = "ERROR"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        env = os.environ if environ is None else environ
        return cls(
            ci=env.get('CI', '').lower() == 'true',
            log_level=env.get('MANIFEST_VALIDATOR_LOG_LEVEL', 'WARNING'),
            print_level=env.get('MANIFEST_VALIDATOR_PRINT_LEVEL', 'ERROR'),
        )

    def with_overrides(self, ci: Optional[bool] = None, log_level: Optional[str] = None) -> 'ValidatorConfig':
        """Return a copy with command-line overrides applied."""
        config = self
        if ci is not None:
            config = replace(config, ci=ci)
        if log_level is not None:
            config = replace(config, log_level=log_level)
        return config

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.WARNING)
        stderr_level = getattr(logging, self.print_level.upper(), logging.ERROR)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        configure_split_stream_logging(level=level, stderr_level=stderr_level, formatter=formatter)

        return logging.getLogger('manifest_validator')
