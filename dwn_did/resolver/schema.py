from os.path import abspath, dirname, join

import jsonref
from jsonschema.validators import validator_for

SCHEMAS_DIR = join(dirname(abspath(__file__)), "schemas")


def _load_json_schema(filename):
    """Loads the given schema file"""

    absolute_path = join(SCHEMAS_DIR, filename)
    base_uri = "file://{}/".format(SCHEMAS_DIR)

    with open(absolute_path) as schema_file:
        return jsonref.loads(schema_file.read(), base_uri=base_uri, jsonschema=True)


def get_schema_validator(schema_file):
    """Instantiates the jsonschema.Validator instance for the given schema

    Parameters
    ----------
    schema_file: str
        The filename of the JSON schema

    Returns
    -------
    jsonschema.Validator
        The validator instance for the given schema
    """
    schema = _load_json_schema(schema_file)
    cls = validator_for(schema)
    cls.check_schema(schema)
    return cls(schema)
