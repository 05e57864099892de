#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List, Optional

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from fincalc_app.config.loader import ConfigLoader
from fincalc_app.config.validation import ConfigValidationError, ConfigValidator


def validate_engine_config(config_dir: Optional[Path] = None) -> List[ConfigValidationError]:
    """Validate the merged engine configuration."""
    loader = ConfigLoader.create(config_dir)
    return ConfigValidator.validate_config(loader.merge_config())


def main():
    """Main validation function."""
    config_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    loader = ConfigLoader.create(config_dir)
    print(f"Validating engine configuration in {loader.config_dir}...")

    all_valid = True

    errors = validate_engine_config(config_dir)
    if errors:
        print(f"Found {len(errors)} validation errors:")
        for error in errors:
            print(f"  - {error.field}: {error.message} (value: {error.value})")
        all_valid = False
    else:
        print("Engine configuration is valid")

    # Overrides are applied on top of the file, the way callers pass them
    test_overrides = {
        "amortization": {"max_months": 360},
        "charts": {"max_points": 120},
    }
    errors = ConfigValidator.validate_config(loader.merge_config(test_overrides))
    if errors:
        print("Override validation failed:")
        for error in errors:
            print(f"  - {error.field}: {error.message}")
        all_valid = False
    else:
        print("Override validation passed")

    sys.exit(0 if all_valid else 1)


if __name__ == "__main__":
    main()
