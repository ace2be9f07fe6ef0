from django.core.management.base import BaseCommand, CommandError

from apps.common.models import StoreConfig
from apps.common.services.store_config import delete_config_value, set_config_value


class Command(BaseCommand):
    help = (
        "Create/update a store configuration value by path, e.g. "
        "`config_set checkout/cart/freeshipping_progress_enable 1`. "
        "Use --scope store --scope-code CODE for a store-level override, "
        "or --delete to remove the row (falls back to the next scope)."
    )

    def add_arguments(self, parser):
        parser.add_argument("path")
        parser.add_argument("value", nargs="?", default=None)
        parser.add_argument(
            "--scope",
            default=StoreConfig.Scope.DEFAULT,
            choices=[choice for choice, _label in StoreConfig.Scope.choices],
        )
        parser.add_argument("--scope-code", dest="scope_code", default="")
        parser.add_argument("--delete", action="store_true")

    def handle(self, *args, **options):
        path = (options["path"] or "").strip().strip("/")
        scope = options["scope"]
        scope_code = (options["scope_code"] or "").strip()

        if not path:
            raise CommandError("path es requerido.")

        if scope == StoreConfig.Scope.STORE and not scope_code:
            raise CommandError("--scope-code es requerido con --scope store.")

        if options["delete"]:
            deleted = delete_config_value(path, scope=scope, scope_code=scope_code)
            if not deleted:
                self.stdout.write(f"{path}: nothing to delete.")
                return
            self.stdout.write(self.style.SUCCESS(f"{path}: deleted."))
            return

        value = options["value"]
        if value is None:
            raise CommandError("value es requerido (o usa --delete).")

        set_config_value(path, value, scope=scope, scope_code=scope_code)
        self.stdout.write(self.style.SUCCESS(f"{path} = {value}"))
