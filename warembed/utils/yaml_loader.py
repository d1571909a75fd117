from pathlib import Path
from typing import Any

from ruamel.yaml import YAML
from ruamel.yaml.constructor import RoundTripConstructor


class SourceTextConstructor(RoundTripConstructor):
    """Round-trip constructor that keeps numbers as the text they were written as.

    Versions and startup options are strings downstream: ``1.10`` must stay
    ``"1.10"`` and ``0x1F`` must stay ``"0x1F"``.
    """

    def construct_source_text(self, node) -> str:
        return node.value


SourceTextConstructor.add_constructor("tag:yaml.org,2002:int", SourceTextConstructor.construct_source_text)
SourceTextConstructor.add_constructor("tag:yaml.org,2002:float", SourceTextConstructor.construct_source_text)


def get_yaml_instance() -> YAML:
    yaml = YAML(typ="rt")
    yaml.Constructor = SourceTextConstructor
    yaml.allow_duplicate_keys = False
    return yaml


def load_yaml_mapping(yaml: YAML, path: str | Path) -> dict[str, Any]:
    with open(path, "r") as f:
        data = yaml.load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {path}, got {type(data).__name__}")
    return data
