from django.contrib.auth.models import AbstractUser
from django.db import models


class User(AbstractUser):
    """Shop customer. Created on registration and never mutated afterwards."""
    email = models.EmailField(blank=True)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'users'
        verbose_name = 'User'
        verbose_name_plural = 'Users'

    def __str__(self):
        return self.username
