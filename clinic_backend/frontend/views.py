"""
Frontend Views
"""

from django.shortcuts import render
from django.urls import reverse
from django.views import View


class IndexView(View):
    """Patients and records screens; all data is loaded from the JSON API."""

    def get(self, request):
        context = {
            'title': 'Clinic Records',
            'api_base': reverse('patients:list').rsplit('/patients', 1)[0],
        }
        return render(request, 'frontend/index.html', context)
