"""List reaction types use case."""

from pydantic import BaseModel

from showtalk.domain.service import ReactionService


class ReactionTypeItem(BaseModel):
    """Reaction type in response."""

    reaction_type_id: int
    name: str
    emoji: str | None
    category: str | None


class ListReactionTypesResponse(BaseModel):
    """List reaction types response."""

    reaction_types: list[ReactionTypeItem]


class ListReactionTypesUseCase:
    """Use case for listing the reaction-type catalog."""

    def __init__(self, reaction_service: ReactionService) -> None:
        self.reaction_service = reaction_service

    async def execute(self) -> ListReactionTypesResponse:
        """Return all reaction types ordered by ID."""
        reaction_types = await self.reaction_service.list_reaction_types()
        return ListReactionTypesResponse(
            reaction_types=[
                ReactionTypeItem(
                    reaction_type_id=t.id,
                    name=t.name,
                    emoji=t.emoji,
                    category=t.category,
                )
                for t in reaction_types
            ]
        )
