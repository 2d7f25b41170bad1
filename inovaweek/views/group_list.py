from typing import List, Optional, Set

from supabase import AsyncClient

from inovaweek.api.v1.schemas.group import GroupCard, GroupDetails, GroupListScreen
from inovaweek.core.logger import logger
from inovaweek.models import Group
from inovaweek.services.errors import FetchError
from inovaweek.services.group import GroupService
from inovaweek.views.messages import ERROR_COLOR

PALETTE = ("#FFD700", "#FF6F61", "#6B8E23", "#4A90E2", "#FFB6C1")

TITLE = "🎓 Grupos InovaWeek"
FETCH_ERROR_TEXT = "Erro ao buscar grupos."
NOTES_TITLE = "🌟 Notas"
NO_NOTES_TEXT = "Nenhuma avaliação disponível"
STUDENTS_TITLE = "👨‍🎓 Alunos"
NO_STUDENTS_TEXT = "Nenhum aluno neste grupo"


def color_index(group_id: int) -> int:
    return group_id % len(PALETTE)


def group_color(group_id: int) -> str:
    return PALETTE[color_index(group_id)]


def display_text(value) -> str:
    """Texto de uma coluna para a tela: nulo vira vazio e ``10.0`` vira ``10``."""
    if value is None:
        return ""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def toggled(expanded: Set[int], group_id: int) -> Set[int]:
    """Retorna uma cópia de ``expanded`` com ``group_id`` alternado."""
    if group_id in expanded:
        return expanded - {group_id}
    return expanded | {group_id}


class GroupListView:
    """
    Tela inicial com a lista de grupos.

    ``mount`` faz uma única busca; depois disso a tela só muda pelo conjunto
    de grupos expandidos.
    """

    def __init__(self, client: AsyncClient):
        self.client = client
        self.loading = True
        self.fetch_error: Optional[str] = None
        self.groups: List[Group] = []
        self.expanded: Set[int] = set()
        self._mounted = False

    async def mount(self) -> None:
        if self._mounted:
            return
        self._mounted = True

        try:
            groups = await GroupService.fetch_groups(self.client)
        except FetchError as e:
            self.fetch_error = FETCH_ERROR_TEXT
            self.groups = []
            logger.error(f"[BUSCA DE GRUPOS] Supabase error: {e.message}")
        else:
            self.groups = groups
            self.fetch_error = None
        finally:
            self.loading = False

    def toggle_expand(self, group_id: int) -> None:
        self.expanded = toggled(self.expanded, group_id)

    def is_expanded(self, group_id: int) -> bool:
        return group_id in self.expanded

    def _details(self, group: Group) -> GroupDetails:
        notes = [f"Nota: {display_text(evaluation.score)}" for evaluation in group.evaluations] or [NO_NOTES_TEXT]
        students = [f"Nome: {display_text(student.name)}" for student in group.students] or [NO_STUDENTS_TEXT]
        return GroupDetails(
            notes_title=NOTES_TITLE,
            notes=notes,
            students_title=STUDENTS_TITLE,
            students=students,
        )

    def _card(self, group: Group) -> GroupCard:
        expanded = self.is_expanded(group.id)
        return GroupCard(
            group_id=group.id,
            title=display_text(group.topic),
            date_label=f"📅 {display_text(group.date)}",
            color=group_color(group.id),
            expanded=expanded,
            details=self._details(group) if expanded else None,
        )

    def render(self) -> GroupListScreen:
        if self.loading:
            return GroupListScreen(loading=True)
        if self.fetch_error:
            return GroupListScreen(loading=False, error=self.fetch_error, error_color=ERROR_COLOR)
        return GroupListScreen(
            loading=False,
            title=TITLE,
            cards=[self._card(group) for group in self.groups],
        )
