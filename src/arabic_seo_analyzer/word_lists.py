"""
Arabic marker-term catalogues used by the structure checks.

Every list is matched whole-word after normalization, so hamza and
taa-marbuta spellings need not be duplicated.
"""

FAQ_KEYWORDS = [
    "الأسئلة الشائعة",
    "أسئلة شائعة",
    "الأسئلة المتكررة",
    "أسئلة متكررة",
    "الأسئلة",
    "أسئلة",
    "سؤال وجواب",
    "استفسارات",
    "FAQ",
]

INTERROGATIVE_H2_KEYWORDS = [
    "ما",
    "ماذا",
    "لماذا",
    "كيف",
    "متى",
    "أين",
    "هل",
    "من",
    "كم",
    "أي",
    "ما هو",
    "ما هي",
]

TRANSITIONAL_WORDS = [
    "بالإضافة إلى",
    "علاوة على ذلك",
    "فضلاً عن",
    "كذلك",
    "أيضاً",
    "لذلك",
    "لذا",
    "وبالتالي",
    "بالتالي",
    "ومن ثم",
    "ثم",
    "بينما",
    "في المقابل",
    "على سبيل المثال",
    "مثلاً",
    "في النهاية",
    "أخيراً",
    "أولاً",
    "ثانياً",
    "ثالثاً",
    "بعد ذلك",
    "قبل ذلك",
    "لكن",
    "ولكن",
    "ومع ذلك",
    "رغم ذلك",
    "إذن",
    "بمعنى آخر",
    "من ناحية أخرى",
    "في الوقت نفسه",
    "نتيجة لذلك",
    "خلاصة القول",
]

CTA_WORDS = [
    "اتصل",
    "اتصل بنا",
    "تواصل",
    "تواصل معنا",
    "احجز",
    "احجز الآن",
    "اطلب",
    "اطلب الآن",
    "سجل",
    "اشترك",
    "احصل",
    "ابدأ",
    "جرب",
    "زر",
    "تصفح",
    "اكتشف",
    "لا تتردد",
    "سارع",
    "بادر",
]

INTERACTIVE_WORDS = [
    "أنت",
    "أنتم",
    "لك",
    "لكم",
    "عزيزي",
    "عزيزتي",
    "هل تعلم",
    "هل تبحث",
    "تخيل",
    "دعنا",
    "دعونا",
    "يمكنك",
    "تستطيع",
    "ستجد",
]

CONCLUSION_KEYWORDS = [
    "الخاتمة",
    "خاتمة",
    "الخلاصة",
    "خلاصة",
    "ختاماً",
    "في الختام",
    "الملخص",
    "ملخص",
    "الكلمة الأخيرة",
]

CONCLUSION_INDICATOR_WORDS = [
    "ختاماً",
    "وختاماً",
    "في الختام",
    "وفي الختام",
    "في النهاية",
    "وفي النهاية",
    "في نهاية المطاف",
    "أخيراً",
    "وأخيراً",
    "خلاصة القول",
    "إجمالاً",
    "باختصار",
    "مما سبق",
    "نستنتج",
]

WARNING_ADVICE_WORDS = [
    "تحذير",
    "احذر",
    "انتبه",
    "تنبيه",
    "نصيحة",
    "ننصح",
    "ننصحك",
    "نصائح",
    "تجنب",
    "لا تنس",
    "ملاحظة",
    "مهم",
    "يفضل",
]

SLOW_WORDS = [
    "في الواقع",
    "في الحقيقة",
    "بشكل عام",
    "إلى حد ما",
    "نوعاً ما",
    "بطبيعة الحال",
    "كما هو معروف",
    "من الجدير بالذكر",
    "الجدير بالذكر",
    "تجدر الإشارة إلى",
    "مما لا شك فيه",
    "لا شك أن",
    "بالفعل",
    "حقاً",
    "فعلاً",
    "جداً",
    "للغاية",
    "بشكل كبير",
    "بصورة كبيرة",
]

AMBIGUOUS_HEADING_WORDS = [
    "هذا",
    "هذه",
    "ذلك",
    "تلك",
    "ذاك",
    "هؤلاء",
    "أولئك",
    "هو",
    "هي",
    "هم",
    "هن",
    "هنا",
    "هناك",
    "الأمر",
    "الشيء",
]

# Function words ignored by the duplicate-word-in-paragraph check
DUPLICATE_WORDS_EXCLUSION_LIST = [
    "الذي", "التي", "اللذان", "اللتان", "الذين", "اللاتي", "اللواتي", "ما", "من", "متى",
    "أين", "كيف", "كم", "أي", "أيان", "مهما", "أينما", "حيثما", "كيفما", "كان", "أصبح",
    "أضحى", "ظل", "أمسى", "بات", "صار", "ليس", "ما زال", "ما دام", "ما برح", "ما انفك",
    "ما فتئ", "إن", "أن", "كأن", "لكن", "ليت", "لعل", "ظن", "حسب", "خال", "زعم", "رأى",
    "علم", "وجد", "ثم", "أو", "أم", "بل", "لا", "حتى", "لن", "كي", "لم", "لما", "ها",
    "ألا", "أما", "إلا", "غير", "سوى", "عدا", "خلا", "حاشا", "أنى", "إذما", "جعل", "حجا",
    "عد", "هب", "تعلم", "درى", "ألفى", "وهب", "إذن", "لا يكون", "أنا", "نحن", "أنت",
    "أنتِ", "أنتما", "أنتن", "هو", "هي", "هما", "هم", "هن", "أب", "أخ", "حم", "فو", "ذو",
    "يا", "أيا", "هيا", "هذا", "هذه", "ذلك", "تلك", "هؤلاء", "أولئك", "هنا", "هناك", "هنالك",
]

# Stock phrases that read as filler when used more than once
REPEATED_PHRASES = [
    "عالم", "أفضل النتائج", "من خلال", "العمل مع", "أن تكون", "سواء كان", "تركز على",
    "بما في", "إلى جانب", "يجب أن", "يمكن أن", "بالإضافة إلى", "يعني أنه", "إلى العديد",
    "في حل", "مما يعزز", "تحديد المشكلة", "في حال", "مما يسهم", "إلى ذلك", "يعزز فرص",
    "مما يساعد", "مما يسهل", "الحفاظ على", "أن يكون", "تقدم الشركة", "مما يجعل", "أكثر من",
    "في مجال", "في تعزيز", "نتائج ملموسة", "خبرة واسعة", "العلامة التجارية", "مجموعة من",
    "رحلتك نحو", "نحو النجاح", "لمساعدتك على", "إن هذا", "في ذلك", "رغم أن", "التي يمكن",
    "يُعتبر هذا", "يُعد هذا", "يُؤدي إلى", "عبر", "بوساطة", "باستخدام", "اعتمادًا على",
    "استنادًا إلى", "يؤدي دورًا", "وبالتالي", "وهذا بدوره", "الأمر الذي يؤدي", "علاوة على ذلك",
    "فضلًا عن", "من الممكن أن", "يُحتمل أن", "عندما", "عند حدوث", "بالتوازي مع",
    "جنبًا إلى جنب", "للوصول إلى", "سعيًا إلى", "ضمن نطاق", "على صعيد", "في إطار",
    "آثار واضحة", "قابلة للقياس", "تجربة عميقة", "معرفة متراكمة", "باتجاه النجاح",
    "في طريق", "فرص واعدة", "إمكانات جديدة", "توجه حديث", "فكر إبداعي", "أداء متميز",
    "تطوير مستمر", "تقدم ملموس", "تعاون فعّال", "شراكة ناجحة", "تجربة فريدة", "نتائج واقعية",
    "رؤية واضحة", "هدف مشترك", "تأثير إيجابي", "حلول مبتكرة", "خطوات مدروسة",
    "استراتيجية متكاملة", "جودة عالية", "معايير دقيقة", "نمو متسارع", "تحسين دائم",
    "موارد محدودة", "بيئة داعمة", "دعم فني", "توسع عالمي", "تحليل دقيق", "التزام قوي",
    "تطوير مهني", "تفكير نقدي", "أداء مستدام", "فريق متكامل", "رؤية مستقبلية",
]

# Tour-program headings
PRE_TRAVEL_H2_KEYWORDS = ["معلومات", "ما قبل السفر", "ما عليك معرفته"]
PRICING_H2_KEYWORDS = ["سعر", "أسعار", "حجز", "تكاليف"]
WHO_IS_IT_FOR_H2_KEYWORDS = ["مناسب", "مرشح", "يناسب"]

# Ordinal day names, compound forms first so the longest one wins
DAY_ORDINALS = [
    "الحادي عشر", "الثاني عشر", "الثالث عشر", "الرابع عشر", "الخامس عشر",
    "السادس عشر", "السابع عشر", "الثامن عشر", "التاسع عشر", "العشرون",
    "الأول", "الثاني", "الثالث", "الرابع", "الخامس",
    "السادس", "السابع", "الثامن", "التاسع", "العاشر",
]
