"""Small shared utilities."""

from saferoute.utils.ids import new_base64_uuid
from saferoute.utils.yaml_utils import normalize_yaml_dict_keys

__all__ = ["new_base64_uuid", "normalize_yaml_dict_keys"]
