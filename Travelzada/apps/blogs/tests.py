from django.urls import reverse
from rest_framework import status
from rest_framework.test import APITestCase

from apps.users.factories import UserFactory
from .factories import BlogPostFactory
from .models import BlogPost


class BlogPublicTestCase(APITestCase):

    def test_visitors_only_see_published_posts(self):
        BlogPostFactory.create_batch(2)
        draft = BlogPostFactory(published=False)

        response = self.client.get(reverse('blog'))
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data['totalItems'], 2)

        response = self.client.get(reverse('blog-detail', kwargs={'pk': draft.pk}))
        self.assertEqual(response.status_code, status.HTTP_404_NOT_FOUND)

    def test_editors_see_drafts(self):
        BlogPostFactory()
        BlogPostFactory(published=False)
        self.client.force_authenticate(user=UserFactory(permissions=['blogs']))

        response = self.client.get(reverse('blog'), {'published': 'false'})
        self.assertEqual(response.data['totalItems'], 1)

    def test_view_and_like_counters(self):
        post = BlogPostFactory()
        self.client.post(reverse('blog-view', kwargs={'pk': post.pk}))
        response = self.client.post(reverse('blog-view', kwargs={'pk': post.pk}))
        self.assertEqual(response.data['views'], 2)

        response = self.client.post(reverse('blog-like', kwargs={'pk': post.pk}))
        self.assertEqual(response.data['likes'], 1)

    def test_by_slug(self):
        post = BlogPostFactory(title='Ten Days in Kerala')
        self.assertEqual(post.slug, 'ten-days-in-kerala')
        response = self.client.get(reverse('blog-by-slug', kwargs={'slug': 'ten-days-in-kerala'}))
        self.assertEqual(response.data['id'], post.pk)


class BlogAdminTestCase(APITestCase):

    def setUp(self):
        self.client.force_authenticate(user=UserFactory(permissions=['blogs']))

    def test_create_generates_unique_slug(self):
        BlogPostFactory(title='Best beaches in Goa')
        response = self.client.post(reverse('blog'), {
            'title': 'Best beaches in Goa',
            'blog_structure': [{'type': 'paragraph', 'text': 'Sun and sand.'}],
        }, format='json')

        self.assertEqual(response.status_code, status.HTTP_201_CREATED)
        self.assertEqual(response.data['slug'], 'best-beaches-in-goa-2')
        self.assertFalse(response.data['published'])

    def test_counters_are_read_only(self):
        post = BlogPostFactory()
        self.client.patch(reverse('blog-detail', kwargs={'pk': post.pk}), {'views': 999}, format='json')
        post.refresh_from_db()
        self.assertEqual(post.views, 0)

    def test_toggle_published(self):
        post = BlogPostFactory(published=False)
        response = self.client.post(reverse('blog-toggle-published', kwargs={'pk': post.pk}))
        self.assertTrue(response.data['published'])
        self.assertTrue(BlogPost.objects.get(pk=post.pk).published)

    def test_search(self):
        BlogPostFactory(title='Monsoon in Munnar', author='Ravi')
        BlogPostFactory(title='Desert nights', author='Meera')
        response = self.client.get(reverse('blog'), {'search': 'munnar'})
        self.assertEqual(response.data['totalItems'], 1)
