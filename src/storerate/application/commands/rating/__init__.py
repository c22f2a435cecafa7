from storerate.application.commands.rating.submit_rating_command import (
    SubmitRatingCommand,
)
from storerate.application.commands.rating.update_rating_command import (
    UpdateRatingCommand,
)

__all__ = ["SubmitRatingCommand", "UpdateRatingCommand"]
