from django.apps import AppConfig


class PurchasesConfig(AppConfig):
    name = "purchases"
    verbose_name = "Ticket purchases"

    def ready(self) -> None:
        from purchases import signals  # noqa: F401
