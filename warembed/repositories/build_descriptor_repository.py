import os
from ruamel.yaml import YAML
from warembed.models import BuildDescriptor
from warembed.utils.yaml_loader import get_yaml_instance, load_yaml_mapping


class BuildDescriptorRepository:
    def __init__(self, file_path: str):
        self.file_path: str = file_path
        self.yaml: YAML = get_yaml_instance()

    def find(self) -> BuildDescriptor | None:
        if not os.path.isfile(self.file_path):
            return None
        try:
            data = load_yaml_mapping(self.yaml, self.file_path)
            return BuildDescriptor(**data)
        except Exception as e:
            raise ValueError(f"Invalid build descriptor structure: {e}") from e
