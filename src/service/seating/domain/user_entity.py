import attrs


@attrs.define(frozen=True)
class User:
    """Identity handed over by the identity provider, trusted as-is"""

    id: str = attrs.field(validator=attrs.validators.instance_of(str))
    username: str = attrs.field(validator=attrs.validators.instance_of(str))
    email: str = attrs.field(validator=attrs.validators.instance_of(str))
