"""
Random Test Data Generator

Supplies the fallback values used when a seed has nothing for a control:
picking one item out of a set, random booleans, and strings keyed by the
control's id/name.
"""

import random
import re
import string
from enum import Enum
from typing import Callable, Dict, Iterable, List, Optional, TypeVar

from faker import Faker

T = TypeVar("T")


class StringKind(str, Enum):
    """Shape of a generated string"""
    ALPHANUMERIC = "alphanumeric"
    ALPHA = "alpha"
    NUMERIC = "numeric"
    # Realistic data chosen from the request key (email, phone, city, ...)
    CONTEXTUAL = "contextual"


class RandomDataGenerator:
    """Contract for the generator the autofill engine falls back on"""

    def pick_one(self, items: Iterable[T]) -> Optional[T]:
        """Pick a random item; None when there is nothing to pick from"""
        raise NotImplementedError

    def generate_string(self, request_key: Optional[str], kind: StringKind = StringKind.ALPHANUMERIC) -> str:
        raise NotImplementedError

    def generate_bool(self) -> bool:
        raise NotImplementedError


class FakerDataGenerator(RandomDataGenerator):
    """
    Generator backed by Faker and a private random.Random.

    Passing a seed makes every value reproducible, which keeps fill sessions
    deterministic under test.
    """

    MIN_LENGTH = 8
    MAX_LENGTH = 16

    def __init__(self, locale: str = "en_US", seed: Optional[int] = None):
        self.locale = locale
        self.random = random.Random(seed)
        self.faker = Faker(locale)
        if seed is not None:
            self.faker.seed_instance(seed)
        # Contextual values are kept per key so related fields agree (password / confirm)
        self.generated_data: Dict[str, str] = {}

        # Order matters: more specific patterns first
        self.field_patterns: Dict[str, Callable[[], str]] = {
            r'(user[_\s-]?name|username|login)': self.generate_username,
            r'(first[_\s-]?name|fname|given[_\s-]?name)': self.faker.first_name,
            r'(last[_\s-]?name|lname|surname|family[_\s-]?name)': self.faker.last_name,
            r'(full[_\s-]?name|name)': self.faker.name,
            r'(email|e-mail|mail)': self.generate_email,
            r'(phone|telephone|mobile|cell)': self.faker.phone_number,
            r'(confirm[_\s-]?password|password[_\s-]?confirm|repeat[_\s-]?password)': self.generate_password,
            r'(password|passwd|pwd)': self.generate_password,
            r'(street|address[_\s-]?line|address1|address)': self.faker.street_address,
            r'(city|town)': self.faker.city,
            r'(state|province|region)': self.faker.state_abbr,
            r'(zip|postal|postcode)': self.faker.zipcode,
            r'(country)': self.faker.country,
            r'(company|organization|business)': self.faker.company,
            r'(job[_\s-]?title|title|position)': self.faker.job,
            r'(date[_\s-]?of[_\s-]?birth|dob|birth[_\s-]?date|birthday)': self.generate_date_of_birth,
            r'(url|website|homepage)': self.faker.url,
            r'(description|about|bio|summary)': lambda: self.faker.paragraph(nb_sentences=2),
            r'(comment|note|message|feedback)': self.faker.sentence,
        }

    # ==================== Contract ====================

    def pick_one(self, items: Iterable[T]) -> Optional[T]:
        pool: List[T] = list(items)
        if not pool:
            return None
        return self.random.choice(pool)

    def generate_bool(self) -> bool:
        return self.random.random() < 0.5

    def generate_string(self, request_key: Optional[str], kind: StringKind = StringKind.ALPHANUMERIC) -> str:
        kind = StringKind(kind)
        if kind is StringKind.CONTEXTUAL:
            return self.generate_for_field(request_key)
        if kind is StringKind.ALPHA:
            return self._random_chars(string.ascii_letters)
        if kind is StringKind.NUMERIC:
            return self._random_chars(string.digits)
        return self._random_chars(string.ascii_letters + string.digits)

    # ==================== Contextual generation ====================

    def generate_for_field(self, field_key: Optional[str]) -> str:
        """Realistic value for a field id/name; alphanumeric when nothing matches"""
        if not field_key:
            return self._random_chars(string.ascii_letters + string.digits)

        cache_key = field_key.lower().strip()
        if cache_key in self.generated_data:
            return self.generated_data[cache_key]

        value = None
        for pattern, generator in self.field_patterns.items():
            if re.search(pattern, cache_key, re.IGNORECASE):
                value = generator()
                break
        if value is None:
            value = self._random_chars(string.ascii_letters + string.digits)

        self.generated_data[cache_key] = value
        return value

    def generate_username(self) -> str:
        return f"{self.faker.user_name()}_{self._random_chars(string.digits, 4)}"

    def generate_email(self) -> str:
        # Random local part avoids "already registered" collisions between runs
        local = self._random_chars(string.ascii_lowercase + string.digits, 8)
        return f"test_{local}@example.com"

    def generate_password(self) -> str:
        """One password per generator so confirm-password fields match"""
        if "password" not in self.generated_data:
            # Upper, lower, digit and symbol satisfy most password rules
            self.generated_data["password"] = f"Test{self.random.randint(100, 999)}!Pwd"
        return self.generated_data["password"]

    def generate_date_of_birth(self) -> str:
        return self.faker.date_of_birth(minimum_age=18, maximum_age=65).strftime("%Y-%m-%d")

    def reset_session(self):
        """Forget cached contextual values"""
        self.generated_data.clear()

    def _random_chars(self, alphabet: str, length: Optional[int] = None) -> str:
        if length is None:
            length = self.random.randint(self.MIN_LENGTH, self.MAX_LENGTH)
        return "".join(self.random.choice(alphabet) for _ in range(length))


def create_generator(locale: str = "en_US", seed: Optional[int] = None) -> FakerDataGenerator:
    """Build the default generator"""
    return FakerDataGenerator(locale=locale, seed=seed)
