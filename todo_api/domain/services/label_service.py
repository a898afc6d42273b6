"""Label domain service"""
from todo_api.domain.entities.label import Label
from todo_api.domain.repositories.label_repository import LabelRepository


class LabelService:
    """Rules on labels that need the repository"""

    def __init__(self, label_repository: LabelRepository):
        self.label_repository = label_repository

    async def is_duplicated(self, label: Label) -> bool:
        """True when another label already carries this label's name"""
        label_found = await self.label_repository.find_by_name(label.name)
        if label_found is None:
            return False
        return label_found != label
