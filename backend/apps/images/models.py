from django.db import models


class Image(models.Model):
    # Nullable because an update overwrites every field, empty values included
    name = models.CharField(max_length=255, null=True, blank=True)
    base64 = models.TextField(null=True, blank=True)
    size = models.BigIntegerField(null=True, blank=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = "images"

    def __str__(self):
        return self.name or f"Image {self.pk}"
