class StoryCalError(Exception):
    """Base error."""

class CalendarConfigError(StoryCalError, ValueError):
    """Raised when a calendar configuration is malformed."""

    def __init__(self, problems, calendar_id=None):
        if isinstance(problems, str):
            problems = [problems]
        self.problems = list(problems)
        self.calendar_id = calendar_id
        where = f"Calendar '{calendar_id}'" if calendar_id else "Calendar"
        super().__init__(f"{where} is invalid: " + "; ".join(self.problems))

class UnknownCalendarError(StoryCalError, KeyError):
    """Raised when a calendar name is not in the registry."""

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return str(self.args[0]) if self.args else ""
