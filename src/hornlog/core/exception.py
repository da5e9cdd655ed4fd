class HornlogError(Exception):
    pass


class ParseError(HornlogError):
    def __init__(self, text, line=None):
        message = f"invalid predicate format: {text}"
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(message)
        self.text = text
        self.line = line


class ResolutionDepthError(HornlogError):
    def __init__(self, depth, goal):
        super().__init__(f"Maximum resolution depth {depth} exceeded while proving {goal}")
        self.depth = depth
        self.goal = goal
