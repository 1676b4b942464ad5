from django.urls import path
from .views import UserMenuView

urlpatterns = [
    path("", UserMenuView, name="user-menu"),
]
