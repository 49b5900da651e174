from django.apps import AppConfig


class StringAnalyserConfig(AppConfig):
    name = 'String_Analyser'
    verbose_name = 'String Analyser'

    store = None

    def ready(self):
        # one store per process, loaded from the configured persistence
        from .persistence import build_persistence
        from .store import StringStore

        self.store = StringStore(build_persistence())
