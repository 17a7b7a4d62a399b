# tests/test_messages.py

import unittest

from macim.core import conversations
from macim.models import Message
from tests.base import ApiTestCase

class MessagesTestCase(ApiTestCase):
    def setUp(self):
        super().setUp()
        self.alice = self.register('a@x.com')
        self.bob = self.register('b@x.com')
        self.carol = self.register('c@x.com')
        self.alice_id = self.user_id(self.alice)
        self.bob_id = self.user_id(self.bob)
        self.carol_id = self.user_id(self.carol)
        self.client.put('/me', headers=self.headers(self.bob), json={'name': 'Bob'})

    def send(self, token, receiver_id, text):
        return self.client.post('/messages', headers=self.headers(token),
                                json={'receiver_id': receiver_id, 'text': text})

    def test_thread_is_in_send_order(self):
        self.send(self.alice, self.bob_id, 'selam')
        self.send(self.bob, self.alice_id, 'merhaba')
        self.send(self.alice, self.bob_id, 'maç var mı?')
        self.send(self.alice, self.carol_id, 'başka konu')

        thread = self.client.get(f'/messages/chat/{self.bob_id}', headers=self.headers(self.alice)).get_json()['messages']
        self.assertEqual([m['text'] for m in thread], ['selam', 'merhaba', 'maç var mı?'])

    def test_inbox_has_latest_per_counterpart(self):
        self.send(self.alice, self.bob_id, 'one')
        self.send(self.bob, self.alice_id, 'two')
        self.send(self.carol, self.alice_id, 'three')

        inbox = self.client.get('/messages/inbox', headers=self.headers(self.alice)).get_json()['inbox']
        self.assertEqual(len(inbox), 2)
        self.assertEqual(inbox[0]['other_user_id'], self.carol_id)
        self.assertEqual(inbox[0]['text'], 'three')
        self.assertEqual(inbox[1]['other_user_id'], self.bob_id)
        self.assertEqual(inbox[1]['text'], 'two')
        self.assertEqual(inbox[1]['other_user_name'], 'Bob')
        self.assertEqual(inbox[1]['other_user_email'], 'b@x.com')

    def test_empty_text_rejected(self):
        response = self.send(self.alice, self.bob_id, '   ')
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()['error'], 'missing_fields')
        self.assertEqual(Message.query.count(), 0)

    def test_unknown_receiver(self):
        response = self.send(self.alice, 9999, 'anyone?')
        self.assertEqual(response.status_code, 404)

    def test_delete_conversation_both_directions(self):
        self.send(self.alice, self.bob_id, 'one')
        self.send(self.bob, self.alice_id, 'two')
        self.send(self.alice, self.carol_id, 'keep me')

        response = self.client.delete(f'/messages/conversation/{self.alice_id}', headers=self.headers(self.bob))
        self.assertEqual(response.get_json(), {'ok': True, 'deleted': 2})

        self.assertEqual(conversations.get_thread(self.alice_id, self.bob_id), [])
        self.assertEqual(len(conversations.get_thread(self.alice_id, self.carol_id)), 1)

    def test_invalid_other_user(self):
        response = self.client.get('/messages/chat/0', headers=self.headers(self.alice))
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.get_json()['error'], 'invalid_other_user')

if __name__ == '__main__':
    unittest.main()
