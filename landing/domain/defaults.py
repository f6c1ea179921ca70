"""Built-in content used when the seed document cannot be loaded."""
from __future__ import annotations


def default_user() -> dict:
    return {
        "brandName": "המותג שלך",
        "name": "השם שלך",
        "title": "התפקיד המקצועי שלך",
        "description": "תיאור מקצועי שלך. הסבר מי אתה ומה אתה עושה.",
        "image": "https://via.placeholder.com/300",
        "phone": "050-123-4567",
    }


def default_products() -> list[dict]:
    return [
        {
            "id": "p1",
            "name": "חבילה בסיסית",
            "description": "מושלם למתחילים",
            "price": "₪299",
            "features": ["תכונה 1", "תכונה 2", "תכונה 3"],
        },
        {
            "id": "p2",
            "name": "חבילת פרימיום",
            "description": "הבחירה הפופולרית ביותר",
            "price": "₪599",
            "features": ["כל תכונות הבסיס", "תכונה 4", "תכונה 5", "תכונה 6"],
        },
        {
            "id": "p3",
            "name": "חבילת Pro",
            "description": "למקצוענים",
            "price": "₪999",
            "features": ["כל תכונות הפרימיום", "תכונה 7", "תכונה 8", "תכונה 9"],
        },
    ]


def default_testimonials() -> list[dict]:
    return [
        {"id": "t1", "name": "שם הלקוח 1", "text": "שירות מעולה! ממליץ בחום.", "image": "https://via.placeholder.com/80"},
        {"id": "t2", "name": "שם הלקוח 2", "text": "חוויה נהדרת, מאוד מקצועי.", "image": "https://via.placeholder.com/80"},
        {"id": "t3", "name": "שם הלקוח 3", "text": "שווה כל שקל!", "image": "https://via.placeholder.com/80"},
    ]
