"""
알림 메시지 템플릿과 화면 표시용 분류
"""

from typing import Dict

from models.notice import NoticeType

NOTICE_MESSAGES = {
    NoticeType.FRIEND_REQUEST: "새로운 친구 요청이 있습니다.",
    NoticeType.COMMENT: "내 기록에 새로운 코멘트가 달렸습니다.",
    NoticeType.FRIEND_ACCEPT: "{nickname}님이 친구 요청을 수락했습니다.",
    NoticeType.ACTIVITY: "다이어리에 새로운 기록이 추가되었습니다.",
}

NOTICE_CATEGORIES = {
    NoticeType.FRIEND_REQUEST: "friend",
    NoticeType.FRIEND_ACCEPT: "friend",
    NoticeType.COMMENT: "comment",
    NoticeType.ACTIVITY: "activity",
}


def get_notice_messages() -> Dict[NoticeType, str]:
    return dict(NOTICE_MESSAGES)


def get_notice_categories() -> Dict[NoticeType, str]:
    return dict(NOTICE_CATEGORIES)
