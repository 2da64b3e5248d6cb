from abc import ABC


class Model(ABC):
    def validate(self):
        pass

    def model_dump(self) -> dict:
        return dict(vars(self))

    def __repr__(self):
        return f"{type(self).__name__}({self.model_dump()})"
