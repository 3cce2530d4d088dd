class ArenaError(Exception):
    """Base for arena errors."""


class UnknownRobotKind(ArenaError, ValueError):
    def __init__(self, code: int):
        super().__init__(f"Unknown robot kind code: {code}")
        self.code = code


class CapabilityError(ArenaError):
    def __init__(self, kind: str, operation: str):
        super().__init__(f"{kind} robots do not support '{operation}'")
        self.kind = kind
        self.operation = operation


class CommandFormatError(ArenaError):
    def __init__(self, index: int, detail: str):
        super().__init__(f"Malformed record #{index}: {detail}")
        self.index = index
        self.detail = detail


class UnknownCommand(ArenaError, ValueError):
    def __init__(self, op: str):
        super().__init__(f"Unknown command: {op!r}")
        self.op = op
