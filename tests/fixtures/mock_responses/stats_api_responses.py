"""
Mock NHL stats API responses for testing.
"""

SCHEDULE_DATE = "2019-10-10"

SCHEDULE_RESPONSE = {
    "copyright": "NHL and the NHL Shield are registered trademarks of the National Hockey League.",
    "totalItems": 2,
    "totalGames": 2,
    "dates": [
        {
            "date": SCHEDULE_DATE,
            "totalItems": 2,
            "totalGames": 2,
            "games": [
                {
                    "gamePk": 2019020029,
                    "link": "/api/v1/game/2019020029/feed/live",
                    "gameType": "R",
                    "season": "20192020",
                    "gameDate": "2019-10-10T23:00:00Z",
                    "status": {"abstractGameState": "Preview", "detailedState": "Scheduled"},
                    "teams": {
                        "away": {
                            "score": 0,
                            "team": {"id": 6, "name": "Boston Bruins", "link": "/api/v1/teams/6"},
                        },
                        "home": {
                            "score": 0,
                            "team": {"id": 3, "name": "New York Rangers", "link": "/api/v1/teams/3"},
                        },
                    },
                },
                {
                    "gamePk": 2019020030,
                    "link": "/api/v1/game/2019020030/feed/live",
                    "gameType": "R",
                    "season": "20192020",
                    "gameDate": "2019-10-11T02:00:00Z",
                    "status": {"abstractGameState": "Preview", "detailedState": "Scheduled"},
                    "teams": {
                        "away": {
                            "score": 0,
                            "team": {"id": 14, "name": "Tampa Bay Lightning", "link": "/api/v1/teams/14"},
                        },
                        "home": {
                            "score": 0,
                            "team": {"id": 26, "name": "Los Angeles Kings", "link": "/api/v1/teams/26"},
                        },
                    },
                },
            ],
        }
    ],
}

EMPTY_SCHEDULE_RESPONSE = {
    "totalItems": 0,
    "totalGames": 0,
    "dates": [],
}

GAME_CONTENT_RESPONSE = {
    "copyright": "NHL and the NHL Shield are registered trademarks of the National Hockey League.",
    "link": "/api/v1/game/2019020029/content",
    "media": {
        "epg": [
            {
                "title": "NHLTV",
                "platform": "web",
                "items": [
                    {
                        "guid": "",
                        "mediaState": "MEDIA_ARCHIVE",
                        "mediaPlaybackId": "68810203",
                        "mediaFeedType": "HOME",
                        "callLetters": "MSG",
                        "eventId": "221-1006262",
                    },
                    {
                        "guid": "",
                        "mediaState": "MEDIA_ARCHIVE",
                        "mediaPlaybackId": "68810303",
                        "mediaFeedType": "AWAY",
                        "callLetters": "NESN",
                        "eventId": "221-1006262",
                    },
                ],
            },
            {
                "title": "Audio",
                "items": [
                    {
                        "mediaPlaybackId": "68810503",
                        "mediaFeedType": "HOME",
                        "callLetters": "WEPN",
                    }
                ],
            },
            {
                "title": "Extended Highlights",
                "topicList": "277350912",
            },
        ]
    },
}

GAME_CONTENT_NO_FEEDS_RESPONSE = {
    "link": "/api/v1/game/2019020030/content",
    "media": {
        "epg": [
            {"title": "NHLTV", "items": []},
            {"title": "Recap", "topicList": "277437418"},
        ]
    },
}
