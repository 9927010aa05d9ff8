from fastapi import HTTPException
from typing import List

from trailstudy.store import Store
from trailstudy.models.folder import Folder
from trailstudy.models.session_user import SessionUser
from trailstudy.api.models.requests.folder import FolderCreate, FolderUpdate
from trailstudy.api.models.responses.folder import FolderResponse
from trailstudy.api.models.responses.topic import TopicResponse
from trailstudy.services.topic import to_topic_response


class FolderService:
    def __init__(self, store: Store):
        self.store = store

    def _get_own_folder(self, folder_id: str, user: SessionUser) -> Folder:
        """Folders are private to their owner, so other users get a 404 too."""
        folder = self.store.get_folder(folder_id)
        if not folder or folder.created_by != user.id:
            raise HTTPException(status_code=404, detail="Folder not found")
        return folder

    def get_folders(self, user: SessionUser) -> List[FolderResponse]:
        return [FolderResponse.model_validate(f) for f in self.store.get_user_folders(user.id)]

    def get_folder(self, folder_id: str, user: SessionUser) -> FolderResponse:
        return FolderResponse.model_validate(self._get_own_folder(folder_id, user))

    def create_folder(self, folder_data: FolderCreate, user: SessionUser) -> FolderResponse:
        folder = self.store.create_folder(name=folder_data.name, created_by=user.id)
        return FolderResponse.model_validate(folder)

    def rename_folder(self, folder_id: str, folder_update: FolderUpdate, user: SessionUser) -> FolderResponse:
        folder = self._get_own_folder(folder_id, user)
        folder.name = folder_update.name
        self.store.update_folder(folder)
        return FolderResponse.model_validate(folder)

    def delete_folder(self, folder_id: str, user: SessionUser) -> dict:
        self._get_own_folder(folder_id, user)
        self.store.delete_folder(folder_id)
        return {"status": "success", "message": "Folder deleted successfully"}

    def add_topic(self, folder_id: str, topic_id: str, user: SessionUser) -> FolderResponse:
        """File one of the user's visible topics in a folder."""
        self._get_own_folder(folder_id, user)
        visible = {t.id for t in self.store.get_user_topics(user.id)}
        visible.update(t.id for t in self.store.get_public_topics())
        if topic_id not in visible or not self.store.add_topic_to_folder(folder_id, topic_id):
            raise HTTPException(status_code=404, detail="Topic not found")
        return FolderResponse.model_validate(self.store.get_folder(folder_id))

    def get_folder_topics(self, folder_id: str, user: SessionUser) -> List[TopicResponse]:
        self._get_own_folder(folder_id, user)
        return [to_topic_response(t) for t in self.store.get_topics_in_folder(folder_id)]
