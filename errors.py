class InvalidArgumentError(ValueError):
    def __init__(self, operation: str, argument: str) -> None:
        self.operation = operation
        self.argument = argument
        super().__init__(f"An {argument.replace('_', ' ')} is required for {operation}.")
