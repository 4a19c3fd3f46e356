"""Exceptions de la librairie update_php."""


class UpdatePHPError(Exception):
    """Erreur de base."""


class UnknownBlockType(UpdatePHPError, KeyError):
    def __init__(self, name: str):
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Bloc inconnu : {self.name!r}"


class BlockAlreadyRegistered(UpdatePHPError, ValueError):
    def __init__(self, name: str):
        super().__init__(f"Bloc déjà enregistré : {name!r}")
        self.name = name
