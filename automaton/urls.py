from django.urls import path
from . import views

urlpatterns = [
    # Liveness check
    path('health', views.health, name='health'),

    # FSA Transformation endpoints
    path('convert', views.convert_nfa_to_dfa, name='convert'),
    path('minimize', views.convert_nfa_to_minimal_dfa, name='minimize'),
]
