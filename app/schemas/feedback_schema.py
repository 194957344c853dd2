from marshmallow import Schema, fields, validate, pre_load
from app.utils.enums import FeedbackCategory

class FeedbackSchema(Schema):
    feedback = fields.Str(required=True, validate=validate.Length(min=1, max=1000, error="Feedback must be between 1 and 1000 characters"))
    type = fields.Str(required=True, validate=validate.OneOf([e.value for e in FeedbackCategory], error="Invalid feedback type"))

    @pre_load
    def strip_feedback(self, data, **kwargs):
        if isinstance(data.get("feedback"), str):
            data = dict(data, feedback=data["feedback"].strip())
        return data
