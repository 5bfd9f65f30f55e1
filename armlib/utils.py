import re
from datetime import datetime
from typing import List, Mapping, Union

from armlib.logger import log
from armlib.types import JsonElement


def rfc3339_str(dt: datetime) -> str:
    """
    Render a datetime as RFC 3339 string.
    Fractional seconds are kept, UTC (and naive datetimes) are written with a `Z` suffix.
    """
    offset = dt.utcoffset()
    if offset is None or offset.total_seconds() == 0:
        return dt.replace(tzinfo=None).isoformat() + "Z"
    return dt.isoformat()


env_var_substitution_pattern = re.compile(r"\$\((\w+)\)")


def replace_env_vars(elem: JsonElement, environment: Mapping[str, str], keep_unresolved: bool = True) -> JsonElement:
    """
    Replace all `$(NAME)` occurrences in string values with the value of the environment variable NAME.
    Unresolved variables are kept as is, or the containing value is dropped if keep_unresolved is false.
    """

    # a special marker to avoid removing nulls
    class UnresolvedEnvVar:
        pass

    # no need to have many instances of this
    Unresolved = UnresolvedEnvVar()

    def replace_env_vars_helper(
        elem: JsonElement, environment: Mapping[str, str], keep_unresolved: bool, path: List[Union[str, int]]
    ) -> Union[JsonElement, UnresolvedEnvVar]:
        if isinstance(elem, dict):
            replaced_dict = {
                k: replace_env_vars_helper(v, environment, keep_unresolved, path + [k]) for k, v in elem.items()
            }
            without_unresolved_dict = {k: v for k, v in replaced_dict.items() if v is not Unresolved}
            return without_unresolved_dict
        elif isinstance(elem, list):
            replaced_list = [
                replace_env_vars_helper(v, environment, keep_unresolved, path + [i]) for i, v, in enumerate(elem)
            ]
            without_unresolved_list = [v for v in replaced_list if v is not Unresolved]
            return without_unresolved_list
        elif isinstance(elem, str):
            str_value = elem
            for match in re.finditer(env_var_substitution_pattern, elem):
                env_var_name = match.group(1)
                if env_var_found := environment.get(env_var_name):
                    str_value = str_value.replace(match.group(0), env_var_found)
                elif keep_unresolved:
                    pass
                else:
                    conf_path = ""
                    for idx, part in enumerate(path):
                        if idx == 0:
                            conf_path += str(part)
                        else:
                            conf_path += f"[{part}]" if isinstance(part, int) else f".{part}"
                    message = f"The environment variable `{env_var_name}` is not defined "
                    message += f"in configuration at path {conf_path}. "
                    message += f"Please set the environment variable `{env_var_name}` or adjust the configuration."
                    log.warning(f"Environment variable substitution failed: {message}")

                    return Unresolved

            return str_value
        else:
            return elem

    result = replace_env_vars_helper(elem, environment, keep_unresolved, [])
    return None if isinstance(result, UnresolvedEnvVar) else result
