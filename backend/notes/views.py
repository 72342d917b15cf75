from backend.core.repository import OwnedRepository
from backend.core.resources import owned_resource_views
from .filters import NoteFilter
from .models import Note
from .serializers import NoteSerializer

# Most recently edited first; every edit refreshes updated_at
note_repository = OwnedRepository(Note, ordering=['-updated_at', '-created_at'], touch_field='updated_at')

note_list_create, note_detail = owned_resource_views(
    'Note', note_repository, NoteSerializer, filterset_class=NoteFilter,
)
