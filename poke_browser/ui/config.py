from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from poke_browser.config.model import GlobalConfig
from poke_browser.core.base_view import BaseView
from poke_browser.core.dataset import Dataset
from poke_browser.core.interaction_manager import InteractionManager
from poke_browser.core.interaction_state import InteractionState
from poke_browser.core.layout import ScaleSet
from poke_browser.core.view_registry import ViewRegistry


@dataclass
class AppConfig:
    """
    Holds shared, read-only state for the Dash app: config, the loaded dataset,
    its scales and the view registry. This is passed into layout + callback
    registration functions instead of using module-level globals.
    """
    global_config: GlobalConfig
    dataset: Dataset
    scales: ScaleSet
    registry: Optional[ViewRegistry] = None

    def validate(self) -> None:
        """Ensure all required services are attached before the app starts."""
        if self.registry is None:
            raise RuntimeError("AppConfig.registry must be initialized.")

    def create_view(self, view_id: str) -> BaseView:
        return self.registry.create(view_id, self.dataset, self.scales)

    def build_manager(self, state: InteractionState) -> InteractionManager:
        """
        Fresh manager over `state` with every interactive view subscribed.
        Views hold per-request style caches, so they are never shared between
        callbacks.
        """
        manager = InteractionManager(state)
        for view in self.registry.create_interactive(self.dataset, self.scales):
            manager.subscribe(view)
        return manager

    def view_of(self, manager: InteractionManager, view_id: str) -> BaseView:
        for view in manager.views:
            if view.id == view_id:
                return view
        raise KeyError(f"View '{view_id}' is not subscribed")

    def interactive_ids(self) -> List[str]:
        return [cls.id for cls in self.registry.all_classes() if cls.interactive]
