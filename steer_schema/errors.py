class SchemaError(Exception):
    pass


class UnknownSchemaElementError(SchemaError):
    pass


class UnsupportedTypeError(SchemaError):
    pass


class SchemaDepthError(SchemaError):
    pass
