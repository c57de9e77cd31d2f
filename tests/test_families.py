# tests/test_families.py
"""
tests/test_families.py
----------------------

Concrete derivations of individual language families: suffix synthesis,
prefixed definite articles, default article strings, particle allomorphs
and validation rules.
"""

from __future__ import annotations

import pytest

from declension.enums import (
    LanguageArticle,
    LanguageCase,
    LanguageGender,
    LanguageNumber,
    LanguagePossessive,
    LanguageStartsWith,
    NounType,
)
from declension.errors import UnsupportedOperationError
from declension.families import semitic
from declension.families.basque import BasqueNounForm, compute_stem_flags
from declension.families.bulgarian import BulgarianNounForm
from declension.families.english import EnglishArticleForm
from declension.families.greek import starts_with_greek_plosive
from declension.families.korean import KoreanAdjectiveForm, ends_with
from declension.families.malayo_polynesian import HawaiianArticleForm
from declension.families.semitic import HEBREW_NOUN_FORMS
from declension.forms import NounForm, PluralNounForm

SG = LanguageNumber.SINGULAR
PL = LanguageNumber.PLURAL
NOM = LanguageCase.NOMINATIVE
ACC = LanguageCase.ACCUSATIVE
ZERO = LanguageArticle.ZERO
INDEF = LanguageArticle.INDEFINITE
DEF = LanguageArticle.DEFINITE
NONE = LanguagePossessive.NONE


# ==============================================================================
# BASQUE
# ==============================================================================


@pytest.mark.parametrize(
    "stem, case, number, article, expected",
    [
        ("mendi", LanguageCase.ERGATIVE, SG, INDEF, "mendik"),
        ("etxe", NOM, SG, INDEF, "etxe"),
        ("etxe", NOM, SG, DEF, "etxea"),
        ("mendi", LanguageCase.INESSIVE, PL, DEF, "mendietan"),
        ("gizon", LanguageCase.DATIVE, SG, INDEF, "gizoni"),
        ("gizon", LanguageCase.PARTITIVE, SG, INDEF, "gizonik"),
        # a-absorption before a suffix starting in a or e
        ("alaba", LanguageCase.ERGATIVE, SG, DEF, "alabak"),
        ("alaba", NOM, PL, DEF, "alabak"),
        # r-doubling, with the lexical exception
        ("txakur", LanguageCase.ERGATIVE, SG, DEF, "txakurrak"),
        ("ur", LanguageCase.ERGATIVE, SG, DEF, "urak"),
    ],
)
def test_basque_render_surface(declension_for, stem, case, number, article, expected) -> None:
    assert declension_for("eu").render_surface(stem, case, number, article) == expected


def test_basque_stem_flags() -> None:
    flags = compute_stem_flags("mendi")
    assert flags == 1 << 3  # vowel only
    assert compute_stem_flags("alaba") & 1
    assert compute_stem_flags("txakur") & (1 << 1)
    assert compute_stem_flags("") == 0


def test_basque_noun_synthesizes_unstored_forms(declension_for) -> None:
    declension = declension_for("eu")
    noun = declension.create_noun("Mountain")
    noun.set_string(BasqueNounForm.BASE, "mendi")
    noun.set_string(BasqueNounForm.SG_GEN_DEF, "mendiaren")

    ergative = declension.get_approximate_noun_form(SG, LanguageCase.ERGATIVE, NONE, INDEF)
    assert noun.get_string(ergative) is None
    assert noun.get_string(BasqueNounForm.SG_ERG_DEF) is None
    assert noun.get_closest_string(ergative) == "mendik"
    # stored overrides win over synthesis
    genitive = declension.get_approximate_noun_form(SG, LanguageCase.GENITIVE, NONE, DEF)
    assert noun.get_string(genitive) == "mendiaren"
    assert noun.get_closest_string(genitive) == "mendiaren"
    # forms outside the stored list are synthesized too
    comitative = declension.get_approximate_noun_form(SG, LanguageCase.COMITATIVE, NONE, DEF)
    assert noun.get_closest_string(comitative) == "mendiarekin"


def test_basque_stem_flags_follow_base_value(declension_for) -> None:
    noun = declension_for("eu").create_noun("Dog")
    assert noun.stem_flags == -1
    noun.set_string(BasqueNounForm.BASE, "Txakur")
    assert noun.stem_flags == compute_stem_flags("txakur")


def test_basque_stem_flags_ignore_later_definite_form(declension_for) -> None:
    declension = declension_for("eu")
    noun = declension.create_noun("Mountain")
    noun.set_string(BasqueNounForm.BASE, "mendi")
    noun.set_string(BasqueNounForm.SG_N_DEF, "mendia")

    assert noun.stem_flags == compute_stem_flags("mendi")
    inessive = declension.get_approximate_noun_form(SG, LanguageCase.INESSIVE, NONE, DEF)
    assert noun.get_closest_string(inessive) == "mendian"


# ==============================================================================
# SEMITIC
# ==============================================================================


def test_hebrew_entity_noun_derives_definite_forms(declension_for) -> None:
    declension = declension_for("iw")
    singular, plural, singular_def, plural_def = HEBREW_NOUN_FORMS
    noun = declension.create_noun("Account", noun_type=NounType.ENTITY, gender=LanguageGender.MASCULINE)
    noun.set_string(singular, "חשבון")

    assert noun.validate_values("Account") is True
    assert noun.get_string(singular_def) == "ה" + "חשבון"
    assert noun.get_string(plural) == "חשבון"
    assert noun.get_string(plural_def) == "ה" + "חשבון"


def test_hebrew_noun_without_singular_is_rejected(declension_for) -> None:
    noun = declension_for("iw").create_noun("Account", noun_type=NounType.ENTITY)
    assert noun.validate_values("Account") is False


def test_arabic_accusative_is_rendered_from_nominative(declension_for) -> None:
    declension = declension_for("ar")
    noun = declension.create_noun("Book", noun_type=NounType.ENTITY, gender=LanguageGender.MASCULINE)
    noun.set_string(declension.get_exact_noun_form(SG, NOM, NONE, ZERO), "كتاب")
    noun.set_string(declension.get_exact_noun_form(SG, NOM, NONE, DEF), "الكتاب")

    # the accusative alif is switched off
    assert noun.get_exact_string(NounForm(number=SG, case=ACC)) == "كتاب"
    assert noun.get_exact_string(NounForm(number=SG, case=ACC, article=DEF)) == "الكتاب"


def test_arabic_accusative_alif_when_enabled(monkeypatch, declension_for) -> None:
    monkeypatch.setattr(semitic, "ADD_ACCUSATIVE_ALIF", True)
    declension = declension_for("ar")
    noun = declension.create_noun("Book")
    noun.set_string(declension.get_exact_noun_form(SG, NOM, NONE, ZERO), "كتاب")
    noun.set_string(declension.get_exact_noun_form(SG, NOM, NONE, DEF), "الكتاب")

    assert noun.get_exact_string(NounForm(number=SG, case=ACC)) == "كتاب" + semitic.FINAL_ALIF
    # definite nouns never take it
    assert noun.get_exact_string(NounForm(number=SG, case=ACC, article=DEF)) == "الكتاب"
    # nor do nouns ending in taa marbuta or hamza
    assert semitic.add_alif_for_accusative("مدرسة") == "مدرسة"
    assert semitic.add_alif_for_accusative("سماء") == "سماء"


def test_arabic_entity_noun_defaults_definite_forms(declension_for) -> None:
    declension = declension_for("ar")
    noun = declension.create_noun("Book", noun_type=NounType.ENTITY, gender=LanguageGender.MASCULINE)
    noun.set_string(declension.get_exact_noun_form(SG, NOM, NONE, ZERO), "كتاب")

    assert noun.validate_values("Book") is True
    assert noun.get_string(declension.get_exact_noun_form(SG, NOM, NONE, DEF)) == "الكتاب"


# ==============================================================================
# DRAVIDIAN
# ==============================================================================


@pytest.mark.parametrize("locale", ["ta", "te", "kn", "ml"])
def test_dravidian_validation_requires_field_forms(declension_for, locale: str) -> None:
    declension = declension_for(locale)
    noun = declension.create_noun("Account")
    noun.set_string(declension.get_exact_noun_form(SG, NOM, NONE, ZERO), "கணக்கு")

    assert noun.validate_values("Account") is False

    noun.set_string(declension.get_exact_noun_form(PL, NOM, NONE, ZERO), "கணக்குகள்")
    assert noun.validate_values("Account") is True


def test_tamil_noun_always_starts_with_consonant(declension_for) -> None:
    noun = declension_for("ta").create_noun("Account", starts_with=LanguageStartsWith.VOWEL)
    assert noun.starts_with is LanguageStartsWith.CONSONANT


def test_tamil_has_seven_cases(declension_for) -> None:
    declension = declension_for("ta")
    assert len(declension.required_cases) == 7
    assert len(declension.all_noun_forms) == 14
    assert declension.get_exact_noun_form(SG, NOM, NONE, DEF) is None


# ==============================================================================
# BULGARIAN
# ==============================================================================


@pytest.mark.parametrize(
    "gender, singular, plural, expected",
    [
        (LanguageGender.MASCULINE, "град", "градове", ("градът", "града", "градовете")),
        (LanguageGender.MASCULINE, "музей", "музеи", ("музеят", "музея", "музеите")),
        (LanguageGender.FEMININE, "книга", "книги", ("книгата", "книгата", "книгите")),
        (LanguageGender.NEUTER, "село", "села", ("селото", "селото", "селата")),
    ],
)
def test_bulgarian_definite_forms_are_derived(declension_for, gender, singular, plural, expected) -> None:
    noun = declension_for("bg").create_noun("Word", gender=gender)
    noun.set_string(BulgarianNounForm.SINGULAR, singular)
    noun.set_string(BulgarianNounForm.PLURAL, plural)

    actual = (
        noun.get_string(BulgarianNounForm.SINGULAR_DEF),
        noun.get_string(BulgarianNounForm.SINGULAR_OBJ_DEF),
        noun.get_string(BulgarianNounForm.PLURAL_DEF),
    )
    assert actual == expected


def test_bulgarian_definite_forms_are_never_stored(declension_for) -> None:
    noun = declension_for("bg").create_noun("Word", gender=LanguageGender.MASCULINE)
    noun.set_string(BulgarianNounForm.SINGULAR, "град")
    noun.set_string(BulgarianNounForm.SINGULAR_DEF, "something")

    assert noun.get_string(BulgarianNounForm.SINGULAR_DEF) == "градът"
    assert noun.get_all_defined_values() == {BulgarianNounForm.SINGULAR: "град"}


def test_macedonian_shares_bulgarian_rules(declension_for) -> None:
    assert type(declension_for("mk")) is type(declension_for("bg"))


# ==============================================================================
# GREEK
# ==============================================================================


def test_greek_plosive_detection() -> None:
    assert starts_with_greek_plosive("πόλη")
    assert starts_with_greek_plosive("μπανάνα")
    assert not starts_with_greek_plosive("λογαριασμός")
    assert not starts_with_greek_plosive("")


def test_greek_noun_derives_starts_with(declension_for) -> None:
    declension = declension_for("el")
    noun = declension.create_noun("City", gender=LanguageGender.FEMININE)
    noun.set_string(declension.all_noun_forms[0], "πόλη")
    assert noun.starts_with is LanguageStartsWith.SPECIAL

    noun.set_string(declension.all_noun_forms[0], "λίμνη")
    assert noun.starts_with is LanguageStartsWith.CONSONANT


def test_greek_accusative_article_keeps_final_nu_before_plosive(declension_for) -> None:
    declension = declension_for("el")
    special = LanguageStartsWith.SPECIAL
    consonant = LanguageStartsWith.CONSONANT
    masculine = LanguageGender.MASCULINE

    def article(starts_with, gender, article_type, case=ACC):
        form = declension.get_article_form(starts_with, gender, SG, case)
        return declension.get_default_article_string(form, article_type)

    assert article(special, masculine, DEF) == "τον"
    assert article(special, LanguageGender.FEMININE, DEF) == "την"
    assert article(consonant, masculine, DEF) == "το"
    assert article(special, masculine, INDEF) == "έναν"
    assert article(consonant, masculine, INDEF) == "ένα"
    assert article(consonant, masculine, DEF, LanguageCase.VOCATIVE) == ""


# ==============================================================================
# ENGLISH / GERMAN
# ==============================================================================


def test_english_entity_noun_takes_default_article(declension_for) -> None:
    declension = declension_for("en_US")
    noun = declension.create_noun(
        "Account", noun_type=NounType.ENTITY, starts_with=LanguageStartsWith.VOWEL
    )
    noun.set_string(PluralNounForm.SINGULAR, "Account")
    noun.set_string(PluralNounForm.PLURAL, "Accounts")

    indefinite = declension.get_approximate_noun_form(SG, NOM, NONE, INDEF)
    definite_plural = declension.get_approximate_noun_form(PL, NOM, NONE, DEF)

    assert noun.get_string(indefinite) == "An account"
    assert noun.get_string(definite_plural) == "The accounts"
    assert noun.get_string(declension.get_approximate_noun_form(PL, NOM, NONE, INDEF)) == "Accounts"


def test_english_article_defaults_to_first_value(declension_for) -> None:
    article = declension_for("en_US").create_article("a", INDEF)
    article.set_string(EnglishArticleForm.SINGULAR, "a")

    assert article.validate("a") is True
    assert article.get_string(EnglishArticleForm.SINGULAR_V) == "a"
    assert article.get_string(EnglishArticleForm.PLURAL) == "a"


def test_english_rejects_unknown_article_type(declension_for) -> None:
    with pytest.raises(UnsupportedOperationError):
        declension_for("en_US").get_default_article_string(
            EnglishArticleForm.SINGULAR, LanguageArticle.PARTITIVE
        )


@pytest.mark.parametrize(
    "gender, value, expected",
    [
        (LanguageGender.NEUTER, "Konto", "Das Konto"),
        (LanguageGender.MASCULINE, "Kunden", "Den Kunden"),
        (LanguageGender.FEMININE, "Rechnung", "Die Rechnung"),
    ],
)
def test_german_definite_accusative(declension_for, gender, value, expected) -> None:
    declension = declension_for("de")
    noun = declension.create_noun("Word", noun_type=NounType.ENTITY, gender=gender)
    for form in declension.all_noun_forms:
        noun.set_string(form, value)

    form = declension.get_approximate_noun_form(SG, ACC, NONE, DEF)
    assert noun.get_string(form) == expected


def test_swedish_definite_article_must_be_stored(declension_for) -> None:
    declension = declension_for("sv")
    assert declension.has_article_in_noun_form
    with pytest.raises(UnsupportedOperationError):
        declension.get_default_article_string(declension.article_forms[0], DEF)


# ==============================================================================
# KOREAN
# ==============================================================================


@pytest.mark.parametrize(
    "value, expected",
    [
        ("사과", LanguageStartsWith.VOWEL),
        ("책", LanguageStartsWith.CONSONANT),
        ("물", LanguageStartsWith.SPECIAL),
        ("", LanguageStartsWith.CONSONANT),
        (None, LanguageStartsWith.CONSONANT),
        ("PDF", LanguageStartsWith.CONSONANT),
    ],
)
def test_korean_noun_ending(value, expected) -> None:
    assert ends_with(value) is expected


def test_korean_particle_agrees_with_noun_ending(declension_for) -> None:
    declension = declension_for("ko")
    particle = declension.create_adjective("subject")
    particle.set_string(KoreanAdjectiveForm.PREV_CONSONANT, "이")
    particle.set_string(KoreanAdjectiveForm.PREV_VOWEL, "가")
    assert particle.validate("subject") is True

    noun = declension.create_noun("Apple")
    noun.set_string(declension.all_noun_forms[0], "사과")

    form = declension.get_adjective_form(
        noun.starts_with, LanguageGender.NEUTER, SG, NOM, ZERO, NONE
    )
    assert particle.get_string(form) == "가"
    # the flap form defaulted to the consonant form
    assert particle.get_string(KoreanAdjectiveForm.PREV_FLAP) == "이"
    assert declension.default_classifier == "개"


# ==============================================================================
# HAWAIIAN / SIMPLE
# ==============================================================================


def test_hawaiian_default_articles(declension_for) -> None:
    declension = declension_for("haw")
    assert declension.get_default_article_string(HawaiianArticleForm.KA, DEF) == "Ka "
    assert declension.get_default_article_string(HawaiianArticleForm.KE, DEF) == "Ke "
    assert declension.get_default_article_string(HawaiianArticleForm.NA, DEF) == "Nā "
    assert declension.get_default_article_string(HawaiianArticleForm.KA, INDEF) == "He "
    assert declension.get_default_article_string(HawaiianArticleForm.KA, ZERO) is None
    with pytest.raises(UnsupportedOperationError):
        declension.get_default_article_string(HawaiianArticleForm.KA, LanguageArticle.PARTITIVE)


def test_hawaiian_article_form_by_starts_with(declension_for) -> None:
    declension = declension_for("haw")
    special = LanguageStartsWith.SPECIAL
    assert declension.get_article_form(special, LanguageGender.NEUTER, SG, NOM) is HawaiianArticleForm.KE
    assert declension.get_article_form(special, LanguageGender.NEUTER, PL, NOM) is HawaiianArticleForm.NA


@pytest.mark.parametrize(
    "locale, classifier",
    [("ja", "つ"), ("zh_CN", "个"), ("zh_TW", "個"), ("vi", "cái")],
)
def test_default_classifiers(declension_for, locale: str, classifier: str) -> None:
    declension = declension_for(locale)
    assert declension.has_classifiers
    assert declension.default_classifier == classifier


def test_vietnamese_distinguishes_plural(declension_for) -> None:
    declension = declension_for("vi")
    noun = declension.create_noun("Account")
    noun.set_string(PluralNounForm.SINGULAR, "tài khoản")
    noun.set_string(PluralNounForm.PLURAL, "các tài khoản")

    assert noun.get_string(declension.get_noun_form(PL, NOM)) == "các tài khoản"
    assert declension.has_capitalization


# ==============================================================================
# ROMANCE / HUNGARIAN ARTICLES
# ==============================================================================

CONS = LanguageStartsWith.CONSONANT
VOWEL = LanguageStartsWith.VOWEL
SPECIAL = LanguageStartsWith.SPECIAL
MASC = LanguageGender.MASCULINE
FEM = LanguageGender.FEMININE


@pytest.mark.parametrize(
    "locale, starts_with, gender, number, article, expected",
    [
        ("it", SPECIAL, MASC, SG, DEF, "Lo "),
        ("it", SPECIAL, MASC, SG, INDEF, "Uno "),
        ("it", VOWEL, FEM, SG, DEF, "L'"),
        ("it", CONS, MASC, PL, DEF, "I "),
        ("it", VOWEL, MASC, PL, DEF, "Gli "),
        ("it", CONS, MASC, PL, INDEF, None),
        ("fr", VOWEL, MASC, SG, DEF, "l'"),
        ("fr", CONS, FEM, SG, DEF, "la "),
        ("es", CONS, MASC, PL, DEF, "Los "),
        ("pt_BR", CONS, FEM, SG, INDEF, "Uma "),
        ("ca", VOWEL, MASC, PL, DEF, "els "),
    ],
)
def test_romance_default_articles(
    declension_for, locale, starts_with, gender, number, article, expected
) -> None:
    declension = declension_for(locale)
    form = declension.get_article_form(starts_with, gender, number, NOM)
    assert declension.get_default_article_string(form, article) == expected


def test_spanish_ignores_starts_with(declension_for) -> None:
    declension = declension_for("es")
    assert not declension.has_starts_with
    assert declension.get_article_form(VOWEL, MASC, SG, NOM) is None


@pytest.mark.parametrize(
    "starts_with, number, article, expected",
    [
        (CONS, SG, DEF, "A "),
        (VOWEL, SG, DEF, "Az "),
        (VOWEL, PL, DEF, "Az "),
        (CONS, SG, INDEF, "Egy "),
        (CONS, PL, INDEF, None),
        (CONS, SG, ZERO, None),
    ],
)
def test_hungarian_default_articles(declension_for, starts_with, number, article, expected) -> None:
    declension = declension_for("hu")
    form = declension.get_article_form(starts_with, LanguageGender.NEUTER, number, NOM)
    assert declension.get_default_article_string(form, article) == expected
