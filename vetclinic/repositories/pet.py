from vetclinic.models import Pet
from .base import BaseRepository


class PetRepository(BaseRepository):
    model = Pet
    entity_name = 'Pet'
    required_fields = ('name', 'species', 'gender')
    updatable_fields = ('name', 'species', 'breed', 'gender', 'birth_date', 'owner_name', 'owner_phone')

    def list_by_owner(self, owner_name, owner_phone):
        """Exact match on both owner fields; there is no owner table."""
        return self.list_active(owner_name=owner_name, owner_phone=owner_phone,
                                order_by=Pet.created_at.desc())
