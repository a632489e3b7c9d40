import pytest
from datetime import datetime, timedelta, timezone
from fastapi import status
from models.notice import Notice
from conftest import auth_header, make_user

class TestNoticeAPI:
    """알림 API 테스트"""

    def test_send_and_list_friend_notice(self, client, test_user, other_user):
        """친구 요청 전송 후 받은 사람 목록에 friend 로 표시"""
        payload = {"messageType": 1, "senderId": test_user.id, "responseId": other_user.id}
        response = client.post("/notices", json=payload, headers=auth_header(test_user))
        assert response.status_code == status.HTTP_201_CREATED
        body = response.json()
        assert body["requestId"] == test_user.id
        assert body["responseId"] == other_user.id
        assert body["messageType"] == 1

        response = client.get("/notices", headers=auth_header(other_user))
        assert response.status_code == status.HTTP_200_OK
        notices = response.json()
        assert len(notices) == 1
        assert notices[0]["type"] == "friend"

    def test_send_invalid_type(self, authenticated_client, db_session):
        response = authenticated_client.post("/notices", json={"messageType": 7, "senderId": 1, "responseId": 2})
        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["detail"] == "잘못된 메시지 타입입니다."
        assert db_session.query(Notice).count() == 0

    def test_send_comment_without_paper(self, authenticated_client):
        response = authenticated_client.post("/notices", json={"messageType": 2, "responseId": 2})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.parametrize("message_type", [1, 3])
    def test_send_friend_notice_as_other_user(self, client, db_session, test_user, other_user, message_type):
        """다른 사용자 명의의 친구 알림은 거부"""
        outsider = make_user(db_session, "outsider@example.com", "outsider")
        payload = {"messageType": message_type, "senderId": test_user.id, "responseId": other_user.id}
        response = client.post("/notices", json=payload, headers=auth_header(outsider))
        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert db_session.query(Notice).count() == 0

    def test_list_comment_notice_missing_page(self, client, test_user):
        """페이지가 없는 코멘트 알림은 목록 조회 시 404"""
        headers = auth_header(test_user)
        payload = {"messageType": 2, "paperId": 55, "responseId": test_user.id}
        assert client.post("/notices", json=payload, headers=headers).status_code == status.HTTP_201_CREATED
        response = client.get("/notices", headers=headers)
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_list_with_request_time(self, client, test_user, other_user):
        headers = auth_header(test_user)
        payload = {"messageType": 1, "senderId": other_user.id, "responseId": test_user.id}
        assert client.post("/notices", json=payload, headers=auth_header(other_user)).status_code == status.HTTP_201_CREATED
        response = client.get("/notices", params={"requestTime": "2000-01-01T00:00:00"}, headers=headers)
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_with_offset_request_time(self, client, test_user, other_user):
        """UTC 이외의 오프셋이 붙은 requestTime 도 같은 시각으로 비교"""
        payload = {"messageType": 1, "senderId": other_user.id, "responseId": test_user.id}
        client.post("/notices", json=payload, headers=auth_header(other_user))
        seoul = timezone(timedelta(hours=9))

        an_hour_ago = (datetime.now(timezone.utc) - timedelta(hours=1)).astimezone(seoul)
        response = client.get("/notices", params={"requestTime": an_hour_ago.isoformat()}, headers=auth_header(test_user))
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

        a_minute_later = (datetime.now(timezone.utc) + timedelta(minutes=1)).astimezone(seoul)
        response = client.get("/notices", params={"requestTime": a_minute_later.isoformat()}, headers=auth_header(test_user))
        assert len(response.json()) == 1

    def test_list_times_are_utc(self, client, test_user, other_user):
        payload = {"messageType": 1, "senderId": other_user.id, "responseId": test_user.id}
        client.post("/notices", json=payload, headers=auth_header(other_user))
        response = client.get("/notices", headers=auth_header(test_user))
        time = datetime.fromisoformat(response.json()[0]["time"].replace("Z", "+00:00"))
        assert time.utcoffset() == timedelta(0)

    def test_delete_notice(self, client, db_session, test_user, other_user):
        notice = Notice(request_id=other_user.id, response_id=test_user.id, message="알림", message_type=1)
        db_session.add(notice)
        db_session.commit()

        response = client.delete(f"/notices/{notice.id}", headers=auth_header(other_user))
        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert db_session.query(Notice).count() == 1

        response = client.delete(f"/notices/{notice.id}", headers=auth_header(test_user))
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert db_session.query(Notice).count() == 0

    def test_delete_missing_notice(self, authenticated_client):
        response = authenticated_client.delete("/notices/999")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_all_notices(self, client, db_session, test_user, other_user):
        db_session.add_all([
            Notice(request_id=other_user.id, response_id=test_user.id, message="a", message_type=1),
            Notice(request_id=other_user.id, response_id=test_user.id, message="b", message_type=3),
        ])
        db_session.commit()
        response = client.delete("/notices", headers=auth_header(test_user))
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert db_session.query(Notice).count() == 0

        response = client.delete("/notices", headers=auth_header(test_user))
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_selected(self, client, db_session, test_user, other_user):
        mine = Notice(request_id=other_user.id, response_id=test_user.id, message="a", message_type=1)
        theirs = Notice(request_id=test_user.id, response_id=other_user.id, message="b", message_type=1)
        db_session.add_all([mine, theirs])
        db_session.commit()

        response = client.request(
            "DELETE", "/notices/selected",
            json={"noticeIds": [mine.id, theirs.id]},
            headers=auth_header(test_user),
        )
        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert db_session.query(Notice).count() == 2

        response = client.request(
            "DELETE", "/notices/selected",
            json={"noticeIds": [mine.id]},
            headers=auth_header(test_user),
        )
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert db_session.query(Notice).count() == 1

    def test_delete_selected_empty(self, authenticated_client):
        response = authenticated_client.request("DELETE", "/notices/selected", json={"noticeIds": []})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete_by_sender(self, client, db_session, test_user, other_user):
        db_session.add(Notice(request_id=other_user.id, response_id=test_user.id, message="a", message_type=1))
        db_session.commit()
        params = {"requestId": other_user.id, "messageType": 1}
        for _ in range(2):
            response = client.delete("/notices/sender", params=params, headers=auth_header(test_user))
            assert response.status_code == status.HTTP_204_NO_CONTENT
        assert db_session.query(Notice).count() == 0
