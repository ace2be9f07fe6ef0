from django.db import models


class StoreConfig(models.Model):
    """Valor de configuración por ruta (``seccion/grupo/campo``) y scope.

    Los valores se guardan como texto; la coerción a bool/número la hace quien lo lee.
    """

    class Scope(models.TextChoices):
        DEFAULT = "default", "Por defecto"
        STORE = "store", "Tienda"

    path = models.CharField(max_length=255, db_index=True)
    scope = models.CharField(max_length=10, choices=Scope.choices, default=Scope.DEFAULT)
    # Vacío para el scope "default".
    scope_code = models.CharField(max_length=64, blank=True, default="")
    value = models.TextField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        constraints = [
            models.UniqueConstraint(fields=["path", "scope", "scope_code"], name="uniq_store_config_path_scope"),
        ]
        ordering = ["path", "scope", "scope_code"]

    def __str__(self) -> str:
        if self.scope == self.Scope.STORE:
            return f"{self.path} [{self.scope_code}] = {self.value}"
        return f"{self.path} = {self.value}"
