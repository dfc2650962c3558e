"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from ..agents.generator import (
    ComponentGenerator,
    ComponentService,
    DescriptionFormatter,
    ModelFactory,
)
from ..handlers.panel import PanelHandler
from ..models.loader import ModelLoader
from ..placement import ComponentWriter, FolderChooser, PlacementResolver
from ..scaffold import ScaffoldGenerator
from .config import Settings, get_settings
from .credentials import CredentialStore, KeyPrompt


class CoreModule(Module):
    """Core dependencies."""

    def __init__(
        self,
        settings: Settings,
        key_prompt: KeyPrompt | None = None,
        choose_folder: FolderChooser | None = None,
        model_factory: ModelFactory | None = None,
    ) -> None:
        self.settings = settings
        self.key_prompt = key_prompt
        self.choose_folder = choose_folder
        self.model_factory = model_factory or ModelLoader.load

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        return self.settings

    @singleton
    @provider
    def provide_credentials(self, settings: Settings) -> CredentialStore:
        """Provide credential store bound to the host's key prompt."""
        return CredentialStore(settings, prompt=self.key_prompt)

    @singleton
    @provider
    def provide_generator(self, settings: Settings, credentials: CredentialStore) -> ComponentGenerator:
        return ComponentGenerator(settings, credentials, model_factory=self.model_factory)

    @singleton
    @provider
    def provide_formatter(self, settings: Settings, credentials: CredentialStore) -> DescriptionFormatter:
        return DescriptionFormatter(settings, credentials, model_factory=self.model_factory)

    @singleton
    @provider
    def provide_resolver(self, settings: Settings) -> PlacementResolver:
        return PlacementResolver(settings.workspace_root, choose_folder=self.choose_folder)

    @singleton
    @provider
    def provide_writer(self, resolver: PlacementResolver) -> ComponentWriter:
        return ComponentWriter(resolver, ScaffoldGenerator())

    @singleton
    @provider
    def provide_service(self, generator: ComponentGenerator, writer: ComponentWriter) -> ComponentService:
        return ComponentService(generator, writer)

    @provider
    def provide_panel_handler(
        self, service: ComponentService, formatter: DescriptionFormatter, credentials: CredentialStore
    ) -> PanelHandler:
        """Provide a fresh panel handler (one per connection)."""
        return PanelHandler(service, formatter, choose_folder=self.choose_folder, credentials=credentials)


def create_container(
    settings: Settings | None = None,
    key_prompt: KeyPrompt | None = None,
    choose_folder: FolderChooser | None = None,
    model_factory: ModelFactory | None = None,
) -> Injector:
    """Create configured injector."""
    return Injector(
        [CoreModule(settings or get_settings(), key_prompt, choose_folder, model_factory)]
    )
