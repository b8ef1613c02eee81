import json

from django.test import TestCase, Client
from django.urls import reverse
from unittest.mock import patch

from accounts.models import Location, User
from images.models import Image
from listings.models import Listing
from social.exceptions import NotFound, PersistenceFailure
from social.models import Follow
from social.services.repository import DjangoFollowRepository


def make_user(username, location=None, **extra):
    location = location or Location.objects.create(city="New York", state="NY")
    return User.objects.create_user(
        username=username,
        email=f"{username}@example.com",
        password="OIUYHZ-secret",
        location=location,
        **extra
    )


class UserSocialGraphTests(TestCase):
    """Follow relation through the User model and the database"""

    def setUp(self):
        self.location = Location.objects.create(city="New York", state="NY")
        self.jb = make_user('jb', self.location)
        self.jbz = make_user('jbz', self.location)
        self.ab = make_user('ab', self.location)

    def test_follow_adds_user_to_followed_users(self):
        """Following a user stores the edge"""
        self.jb.follow(self.jbz)

        self.assertEqual(self.jb.followed_users, [self.jbz])
        self.assertTrue(Follow.objects.filter(follower=self.jb, followed=self.jbz).exists())

    def test_includes_myself(self):
        """Feed scope lists own id then followed ids"""
        self.jb.follow(self.jbz)

        self.assertEqual(self.jb.includes_myself(), [self.jb.pk, self.jbz.pk])

    def test_includes_myself_keeps_follow_order(self):
        """Ids come back in the order users were followed"""
        self.jb.follow(self.ab)
        self.jb.follow(self.jbz)

        self.assertEqual(self.jb.includes_myself(), [self.jb.pk, self.ab.pk, self.jbz.pk])

    def test_is_following(self):
        """A follower is reported as following the followed user"""
        self.jbz.follow(self.jb)

        self.assertTrue(self.jbz.is_following(self.jb))
        self.assertFalse(self.jb.is_following(self.jbz))
        self.assertEqual(self.jb.followers, [self.jbz])

    def test_unfollow_keeps_other_followed_users(self):
        """Unfollowing jbz leaves ab followed"""
        self.jb.follow(self.jbz)
        self.jb.follow(self.ab)

        self.jb.unfollow(self.jbz)

        self.assertNotIn(self.jbz, self.jb.followed_users)
        self.assertEqual(self.jb.followed_users, [self.ab])

    def test_unfollow_without_follow_is_noop(self):
        """Unfollowing someone never followed does nothing"""
        self.jb.unfollow(self.jbz)

        self.assertEqual(Follow.objects.count(), 0)

    def test_duplicate_follow_stores_one_edge(self):
        """Following twice leaves a single row"""
        self.jb.follow(self.jbz)
        self.jb.follow(self.jbz)

        self.assertEqual(Follow.objects.filter(follower=self.jb, followed=self.jbz).count(), 1)

    def test_deleting_user_removes_edges(self):
        """Follow rows go away with either user"""
        self.jb.follow(self.jbz)
        self.jbz.follow(self.jb)

        self.jbz.delete()

        self.assertEqual(Follow.objects.count(), 0)
        self.assertEqual(self.jb.includes_myself(), [self.jb.pk])

    def test_can_accept_own_listing(self):
        """A user can accept offers on listings they created"""
        listing = Listing.objects.create(name="pen", description="black one", user=self.jb)

        self.assertTrue(self.jb.can_accept(listing))
        self.assertFalse(self.jbz.can_accept(listing))


class DjangoFollowRepositoryTests(TestCase):
    """ORM-backed repository behaviour"""

    def setUp(self):
        self.repository = DjangoFollowRepository()
        self.jb = make_user('jb')

    def test_find_user_unknown_id_raises_not_found(self):
        """Missing users surface as NotFound"""
        with self.assertRaises(NotFound):
            self.repository.find_user(self.jb.pk + 1000)

    def test_remove_follow_reports_whether_edge_existed(self):
        """remove_follow returns True only when a row was deleted"""
        jbz = make_user('jbz')
        self.repository.add_follow(self.jb.pk, jbz.pk)

        self.assertTrue(self.repository.remove_follow(self.jb.pk, jbz.pk))
        self.assertFalse(self.repository.remove_follow(self.jb.pk, jbz.pk))

    def test_is_following_checks_a_single_edge(self):
        """is_following answers for the directed pair only"""
        jbz = make_user('jbz')
        self.repository.add_follow(self.jb.pk, jbz.pk)

        self.assertTrue(self.repository.is_following(self.jb.pk, jbz.pk))
        self.assertFalse(self.repository.is_following(jbz.pk, self.jb.pk))

    def test_count_followers_counts_rows(self):
        """count_followers matches the number of follow rows"""
        jbz = make_user('jbz')
        ab = make_user('ab')
        self.repository.add_follow(jbz.pk, self.jb.pk)
        self.repository.add_follow(ab.pk, self.jb.pk)

        self.assertEqual(self.repository.count_followers(self.jb.pk), 2)
        self.assertEqual(self.repository.count_followers(ab.pk), 0)


class FollowViewTests(TestCase):
    """Tests for follow and unfollow endpoints"""

    def setUp(self):
        self.client = Client()
        self.follower = make_user('follower')
        self.followed_user = make_user('followed')
        self.client.force_login(self.follower)
        self.follow_url = reverse('follow', args=[self.followed_user.pk])

    def test_follow_redirects_to_followed_user(self):
        """POST follows the user and redirects to their profile"""
        response = self.client.post(self.follow_url)

        self.assertRedirects(response, reverse('profile', args=['followed']))
        self.assertTrue(self.follower.is_following(self.followed_user))

    def test_delete_unfollows(self):
        """DELETE removes the follow and redirects to the profile"""
        self.follower.follow(self.followed_user)

        response = self.client.delete(self.follow_url)

        self.assertRedirects(response, reverse('profile', args=['followed']))
        self.assertFalse(self.follower.is_following(self.followed_user))

    def test_unfollow_post_route(self):
        """The form-friendly unfollow route removes the follow"""
        self.follower.follow(self.followed_user)

        response = self.client.post(reverse('unfollow', args=[self.followed_user.pk]))

        self.assertEqual(response.status_code, 302)
        self.assertFalse(self.follower.is_following(self.followed_user))

    def test_follow_unknown_user_returns_404(self):
        """Following a missing user is a 404"""
        response = self.client.post(reverse('follow', args=[self.followed_user.pk + 1000]))

        self.assertEqual(response.status_code, 404)

    def test_follow_requires_login(self):
        """Anonymous users are sent to log in"""
        self.client.logout()

        response = self.client.post(self.follow_url)

        self.assertEqual(response.status_code, 302)
        self.assertIn(reverse('login'), response.url)
        self.assertEqual(Follow.objects.count(), 0)

    def test_follow_rejects_get(self):
        """Only POST and DELETE are allowed"""
        response = self.client.get(self.follow_url)

        self.assertEqual(response.status_code, 405)

    def test_ajax_follow_returns_json(self):
        """AJAX callers get the new follow state"""
        response = self.client.post(self.follow_url, HTTP_X_REQUESTED_WITH='XMLHttpRequest')

        self.assertEqual(response.status_code, 200)
        data = json.loads(response.content)
        self.assertTrue(data['success'])
        self.assertTrue(data['following'])
        self.assertEqual(data['followers_count'], 1)

    def test_ajax_follow_self_returns_400(self):
        """Following yourself is rejected"""
        response = self.client.post(
            reverse('follow', args=[self.follower.pk]),
            HTTP_X_REQUESTED_WITH='XMLHttpRequest',
        )

        self.assertEqual(response.status_code, 400)
        self.assertEqual(json.loads(response.content)['error'], 'Cannot follow yourself')
        self.assertEqual(Follow.objects.count(), 0)

    def test_follow_self_redirects_with_message(self):
        """Browser requests to follow yourself redirect back to your profile"""
        response = self.client.post(reverse('follow', args=[self.follower.pk]), follow=True)

        self.assertContains(response, 'Cannot follow yourself')

    @patch.object(DjangoFollowRepository, 'add_follow', side_effect=PersistenceFailure('down'))
    def test_persistence_failure_returns_500(self, _add_follow):
        """Store failures are reported as server errors"""
        response = self.client.post(self.follow_url, HTTP_X_REQUESTED_WITH='XMLHttpRequest')

        self.assertEqual(response.status_code, 500)
        self.assertEqual(json.loads(response.content)['error'], 'Database error occurred')


class FollowListViewTests(TestCase):
    """Tests for the following/followers JSON lists"""

    def setUp(self):
        self.client = Client()
        self.jb = make_user('jb')
        self.jbz = make_user('jbz')
        self.ab = make_user('ab')
        self.jb.follow(self.jbz)
        self.jb.follow(self.ab)

    def test_following_list_in_follow_order(self):
        """Following list matches follow order"""
        response = self.client.get(reverse('following-list', args=[self.jb.pk]))

        data = json.loads(response.content)
        self.assertEqual(data['count'], 2)
        self.assertEqual([entry['username'] for entry in data['following']], ['jbz', 'ab'])

    def test_followers_list(self):
        """Followers list shows who follows the user"""
        response = self.client.get(reverse('followers-list', args=[self.ab.pk]))

        data = json.loads(response.content)
        self.assertEqual(data['followers'][0]['user_id'], self.jb.pk)

    def test_unknown_user_returns_404(self):
        """Lists for missing users are a 404"""
        response = self.client.get(reverse('following-list', args=[self.ab.pk + 1000]))

        self.assertEqual(response.status_code, 404)


class ProfileViewTests(TestCase):
    """Tests for user profile pages"""

    def setUp(self):
        self.client = Client()
        self.jb = make_user('jb')
        self.jbz = make_user('jbz')

    def test_profile_renders(self):
        """Profile page shows the user"""
        response = self.client.get(reverse('profile', args=['jbz']))

        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, 'social/profile.html')
        self.assertContains(response, 'jbz')

    def test_profile_unknown_username_returns_404(self):
        """Missing users are a 404"""
        response = self.client.get(reverse('profile', args=['nobody']))

        self.assertEqual(response.status_code, 404)

    def test_profile_shows_follow_state(self):
        """Viewer's follow state is in the context"""
        self.jb.follow(self.jbz)
        self.client.force_login(self.jb)

        response = self.client.get(reverse('profile', args=['jbz']))

        self.assertTrue(response.context['is_following'])
        self.assertContains(response, 'Unfollow')


class FeedViewTests(TestCase):
    """Tests for the feed of self and followed users' images"""

    def setUp(self):
        self.client = Client()
        self.jb = make_user('jb')
        self.jbz = make_user('jbz')
        self.stranger = make_user('stranger')
        self.own = Image.objects.create(name='Own', url='https://img.example.com/own.jpg', user=self.jb)
        self.followed = Image.objects.create(
            name='Followed', url='https://img.example.com/followed.jpg', user=self.jbz
        )
        self.other = Image.objects.create(
            name='Other', url='https://img.example.com/other.jpg', user=self.stranger
        )
        self.jb.follow(self.jbz)
        self.client.force_login(self.jb)

    def test_feed_requires_login(self):
        """Anonymous users are sent to log in"""
        self.client.logout()

        response = self.client.get(reverse('dashboard'))

        self.assertEqual(response.status_code, 302)

    def test_feed_shows_own_and_followed_images(self):
        """Feed covers the feed scope only"""
        response = self.client.get(reverse('dashboard'))

        self.assertEqual(response.status_code, 200)
        self.assertTemplateUsed(response, 'social/feed.html')
        self.assertEqual(response.context['feed_scope'], [self.jb.pk, self.jbz.pk])
        self.assertContains(response, 'Own')
        self.assertContains(response, 'Followed')
        self.assertNotContains(response, 'Other')

    def test_feed_is_paginated(self):
        """Feed honours the configured page size"""
        with self.settings(SOCIALNET_FEED_PAGE_SIZE=1):
            response = self.client.get(reverse('dashboard'))

        self.assertEqual(len(response.context['images']), 1)
        self.assertEqual(response.context['page_obj'].paginator.num_pages, 2)
