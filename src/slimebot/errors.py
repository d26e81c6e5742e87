class SlimeError(Exception):
    pass


class ConfigNotFound(SlimeError):
    def __init__(self, path):
        self.path = path
        super().__init__(f'Config file "{path}" not found.')


class MissingToken(SlimeError):
    def __init__(self):
        super().__init__("'DISCORD_TOKEN' was not found")
