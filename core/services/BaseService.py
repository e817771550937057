class BaseService:
    def __init__(self, repository):
        self.repository = repository

    def count(self) -> int:
        return self.repository.count()
