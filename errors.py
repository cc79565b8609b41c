class ForumError(Exception):
    """Base class for errors raised by the post store."""


class PostValidationError(ForumError):
    """Post input broke a field constraint. `errors` maps field name to message."""

    def __init__(self, errors):
        self.errors = dict(errors)
        fields = ', '.join(sorted(self.errors))
        super().__init__(f"Invalid post fields: {fields}")

    @classmethod
    def from_pydantic(cls, exc):
        errors = {}
        for error in exc.errors():
            field = str(error['loc'][0]) if error['loc'] else '__all__'
            errors.setdefault(field, error['msg'])
        return cls(errors)


class PostNotFound(ForumError):
    def __init__(self, post_id):
        self.post_id = post_id
        super().__init__(f"Post not found: {post_id}")
