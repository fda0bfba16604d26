from django.test import TestCase


class IndexViewTest(TestCase):
    def test_index_renders_screens(self):
        response = self.client.get("/")

        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, "frontend/index.html")
        self.assertContains(response, 'data-api-base="/api"')
        self.assertContains(response, "Clinic Records")
