"""Generate JSON schemas from Pydantic models and save to schemas/ directory."""

import json
from pathlib import Path

from xctestrun.contracts import InstalledApp, ValidationResult
from xctestrun.kernel.format_v2 import XCTestRunV2
from xctestrun.kernel.scheme import SchemeRecord


def generate_schemas():
    """Generate JSON schemas for all models."""
    schemas_dir = Path(__file__).parent.parent / "schemas"
    schemas_dir.mkdir(exist_ok=True)

    models = {
        "scheme_record.schema.json": SchemeRecord,
        "xctestrun_v2.schema.json": XCTestRunV2,
        "installed_app.schema.json": InstalledApp,
        "validation_result.schema.json": ValidationResult,
    }
    for filename, model in models.items():
        schema_path = schemas_dir / filename
        with open(schema_path, 'w', encoding='utf-8') as f:
            json.dump(model.model_json_schema(), f, indent=2, ensure_ascii=False)
        print(f"Generated: {schema_path}")

    print("\nSchema generation complete!")


if __name__ == "__main__":
    generate_schemas()
