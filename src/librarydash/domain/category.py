"""Category domain service."""

import threading
from concurrent.futures import Executor, Future
from typing import Callable, Optional

from librarydash.api.base import ApiClient, ensure_success
from librarydash.api.mappers import categories_from_payload, category_from_payload
from librarydash.domain.entities import ApiResponse, Category, FormMode, FormState, Resource
from librarydash.domain.error_board import ErrorBoard
from librarydash.domain.errors import (
    CATEGORY_NAME_REQUIRED,
    CONFIRM_ARCHIVE,
    CREATE_CATEGORY_FAILED,
    DELETE_CATEGORY_FAILED,
    FETCH_CATEGORIES_FAILED,
    InvalidStateError,
    MalformedResponseError,
    RemoteError,
    UPDATE_CATEGORY_FAILED,
    describe_failure,
    submit_without_form,
)
from librarydash.domain.resource import ResourceSlot
from librarydash.domain.stats import StatsFetcher
from librarydash.logger import get_logger

logger = get_logger()

DEFAULT_EDITOR_LABEL = "Admin"


def _always_confirm(prompt: str) -> bool:
    return True


class CategoryStore:
    """Service for listing and editing categories.

    Owns the category list and the create/edit form. Every successful write
    is followed by a full re-fetch of the list; the local list is never
    patched in place.
    """

    def __init__(
        self,
        api: ApiClient,
        stats: StatsFetcher,
        errors: Optional[ErrorBoard] = None,
        confirm: Callable[[str], bool] = _always_confirm,
        editor_label: str = DEFAULT_EDITOR_LABEL,
        executor: Optional[Executor] = None,
    ):
        """Initialize category store.

        Args:
            api: API client instance
            stats: Stats fetcher refreshed after create and archive
            errors: Shared error board (defaults to the stats fetcher's board)
            confirm: Asked before archiving; returning False cancels the archive
            editor_label: Editor name sent when the form's editor is blank
            executor: Runs follow-up refreshes concurrently; inline if None
        """
        self.api = api
        self.stats = stats
        self.errors = errors or stats.errors
        self.confirm = confirm
        self.editor_label = editor_label
        self.executor = executor

        self._slot: ResourceSlot[tuple[Category, ...]] = ResourceSlot(())
        self._form_lock = threading.Lock()
        self._form = FormState()
        self._mode = FormMode.IDLE
        self._submitting = False
        self.pending_refreshes: list[Future] = []
        self.last_saved: Optional[Category] = None

    @property
    def categories(self) -> list[Category]:
        """The last successfully fetched category list, in server order."""
        return list(self._slot.value)

    @property
    def error(self) -> Optional[str]:
        return self.errors.get(Resource.CATEGORIES)

    @property
    def form(self) -> FormState:
        return self._form

    @property
    def mode(self) -> FormMode:
        return self._mode

    @property
    def is_submitting(self) -> bool:
        return self._submitting

    def get_category(self, category_id: int) -> Optional[Category]:
        """Get a loaded category by ID.

        Args:
            category_id: Category ID

        Returns:
            Category or None if it is not in the loaded list
        """
        for category in self._slot.value:
            if category.category_id == category_id:
                return category
        return None

    def list(self) -> Optional[list[Category]]:
        """Fetch all categories and replace the loaded list.

        Returns:
            The new list, or None if the fetch failed or was superseded. On
            failure the previous list is kept.
        """
        ticket = self._slot.begin()
        try:
            categories = categories_from_payload(ensure_success(self.api.list_categories()))
        except RemoteError as e:
            if self._slot.settle(ticket):
                logger.warning(f"Error fetching categories: {e}")
                self.errors.report(Resource.CATEGORIES, FETCH_CATEGORIES_FAILED)
            return None

        if not self._slot.accept(ticket, tuple(categories)):
            logger.debug(f"Discarded stale category list (request {ticket})")
            return None
        return categories

    # Form lifecycle

    def open_create(self) -> None:
        """Show an empty form for a new category."""
        self._form = FormState()
        self._mode = FormMode.CREATING
        self.errors.clear()

    def start_edit(self, category: Category) -> None:
        """Show the form pre-filled from category, replacing any pending edit."""
        self._form = FormState.from_category(category)
        self._mode = FormMode.EDITING
        self.errors.clear()

    def set_field(self, name: str, value: str) -> None:
        """Change one form field.

        Raises:
            ValueError: If name is not a form field
        """
        self._form = self._form.with_field(name, value)

    def cancel(self) -> None:
        """Hide and clear the form without any remote call."""
        self._reset_form()

    def _reset_form(self) -> None:
        self._form = FormState()
        self._mode = FormMode.IDLE
        self.errors.clear()

    def submit(self) -> bool:
        """Submit the open form as a create or an update.

        Raises:
            InvalidStateError: If no form is open
        """
        if self._mode == FormMode.CREATING:
            return self.create()
        if self._mode == FormMode.EDITING and self._form.editing is not None:
            return self.update(self._form.editing.category_id)
        raise InvalidStateError(submit_without_form())

    # Writes

    def create(self, form: Optional[FormState] = None) -> bool:
        """Create a category from the form.

        On success the form is cleared and both the category list and the
        dashboard summary are re-fetched.

        Args:
            form: Form to submit (defaults to the store's current form)

        Returns:
            True on success. On failure the message is recorded on the error
            board and the form stays open.
        """
        return self._submit_write(
            form,
            send=lambda payload: self.api.create_category(payload),
            default_message=CREATE_CATEGORY_FAILED,
            refresh_stats=True,
        )

    def update(self, category_id: int, form: Optional[FormState] = None) -> bool:
        """Update an existing category from the form.

        On success the form is cleared and only the category list is
        re-fetched; the dashboard summary is left as is.

        Args:
            category_id: ID of the category to update
            form: Form to submit (defaults to the store's current form)
        """
        return self._submit_write(
            form,
            send=lambda payload: self.api.update_category(category_id, payload),
            default_message=UPDATE_CATEGORY_FAILED,
            refresh_stats=False,
        )

    def _submit_write(
        self,
        form: Optional[FormState],
        send: Callable[[dict[str, str]], ApiResponse],
        default_message: str,
        refresh_stats: bool,
    ) -> bool:
        with self._form_lock:
            if self._submitting:
                logger.warning("Ignoring category submit while another is in progress")
                return False
            self._submitting = True
            self.last_saved = None

        try:
            if form is None:
                form = self._form
            self.errors.clear()

            if not form.category_name.strip():
                self.errors.report(Resource.CATEGORIES, CATEGORY_NAME_REQUIRED)
                return False

            try:
                data = ensure_success(send(form.payload(self.editor_label)))
            except RemoteError as e:
                logger.warning(f"{default_message}: {e}")
                self.errors.report(Resource.CATEGORIES, describe_failure(e, default_message))
                return False
        finally:
            with self._form_lock:
                self._submitting = False

        self.last_saved = self._saved_category(data)
        self._reset_form()
        self._refresh(refresh_stats)
        return True

    def _saved_category(self, data: object) -> Optional[Category]:
        if not data:
            return None
        try:
            return category_from_payload(data)
        except MalformedResponseError as e:
            logger.debug(f"Ignoring unreadable category in write response: {e}")
            return None

    def archive(self, category_id: int) -> bool:
        """Archive (soft-delete) a category after confirmation.

        On success both the category list and the dashboard summary are
        re-fetched.

        Returns:
            True if the category was archived
        """
        if not self.confirm(CONFIRM_ARCHIVE):
            logger.info(f"Archive of category {category_id} cancelled")
            return False

        try:
            ensure_success(self.api.archive_category(category_id))
        except RemoteError as e:
            logger.warning(f"Error deleting category {category_id}: {e}")
            self.errors.report(Resource.CATEGORIES, DELETE_CATEGORY_FAILED)
            return False

        self._refresh(refresh_stats=True)
        return True

    def _refresh(self, refresh_stats: bool) -> None:
        tasks: list[Callable[[], object]] = [self.list]
        if refresh_stats:
            tasks.append(self.stats.fetch)

        if self.executor is None:
            for task in tasks:
                task()
            return

        self.pending_refreshes = [self.executor.submit(task) for task in tasks]
