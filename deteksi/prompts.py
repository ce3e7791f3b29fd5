"""Indonesian prompt templates sent to Gemini for each detection page.

Every prompt asks for a fixed plain-text layout (emoji headings, bullet
lines, a confidence percentage) and forbids markdown, since results are
rendered verbatim inside a <pre> block.
"""

from deteksi.exceptions import InvalidInputError

PLAIN_TEXT_SUFFIX = "Jawab tanpa menggunakan format markdown atau simbol bintang."

TEXT_ANALYSIS_TYPES: dict[str, str] = {
    "sentiment": "Analisis Sentimen",
    "language": "Deteksi Bahasa",
    "keywords": "Ekstraksi Kata Kunci",
    "factargument": "Fakta atau Argumen",
}


def animal_prompt(food: str) -> str:
    return f"""Analisis gambar hewan ini dan berikan informasi dalam format bersih berikut:

🐾 MAKANAN: {food}

IDENTIFIKASI:
• Nama: [nama Indonesia] (nama Latin)
• Jenis: [herbivora/karnivora/omnivora]
• Habitat: [dimana hidup]

ANALISIS MAKANAN:
✅ Cocok / ❌ Tidak Cocok / ⚠️ Hati-hati
Alasan: [penjelasan singkat]

FAKTA MENARIK:
• [1 fakta unik tentang hewan ini]
• [tips singkat jika dipelihara]

Tingkat Kepercayaan: [XX]%

Jawab dengan singkat dan informatif tanpa menggunakan format markdown atau simbol bintang."""


def plant_prompt() -> str:
    return """Analisis gambar tumbuhan ini dan berikan informasi dalam format bersih berikut:

🌱 IDENTIFIKASI:
• Nama: [nama Indonesia] (nama Latin)
• Familia: [nama familia]
• Jenis: [pohon/semak/herba/tanaman merambat]

🍃 CIRI KHAS:
• Daun: [bentuk singkat]
• Bunga: [warna/bentuk jika ada]
• Habitat: [dimana tumbuh]

💡 KEGUNAAN:
• [kegunaan utama: hias/obat/pangan/industri]
• [manfaat khusus jika ada]

🌿 CARA RAWAT:
• Cahaya: [penuh/teduh/sebagian]
• Air: [sering/jarang/sedang]
• Tanah: [jenis tanah yang cocok]

Tingkat Kepercayaan: [XX]%

Jawab dengan singkat dan informatif tanpa menggunakan format markdown atau simbol bintang."""


def medicinal_plant_prompt() -> str:
    return """Analisis gambar tumbuhan ini untuk deteksi obat herbal:

🌿 STATUS: [TUMBUHAN OBAT / BUKAN TUMBUHAN OBAT / TIDAK PASTI]

IDENTIFIKASI:
• Nama: [nama Indonesia] (nama Latin)
• Bagian obat: [daun/akar/batang/bunga/buah]

💊 KHASIAT UTAMA:
• Untuk mengobati: [1-2 penyakit utama]
• Cara pakai: [direbus/ditumbuk/dimakan/dioleskan]

⚠️ KEAMANAN:
• Status: [AMAN/HATI-HATI/BERBAHAYA]
• Catatan: [peringatan singkat jika ada]

📋 INFO SINGKAT:
• Nama lokal: [jika ada]
• Habitat: [dimana tumbuh]

Kepercayaan: [XX]%

PERINGATAN: Konsultasi dokter sebelum digunakan untuk pengobatan.

Jawab singkat dan jelas tanpa format markdown atau simbol bintang."""


_HISTORY_SECTIONS = """🏛️ IDENTIFIKASI:
• Nama{name_suffix}
• Kategori: [Pahlawan Nasional/Ilmuwan/Tokoh Dunia/Peristiwa Sejarah]
• Periode: [tahun lahir-wafat atau tahun kejadian]
• Negara/Asal: [tempat asal atau lokasi peristiwa]

📚 BIOGRAFI SINGKAT:
• Latar belakang: [kelahiran, keluarga, pendidikan]
• Pencapaian utama: [kontribusi terpenting]
• Peran sejarah: [mengapa penting dalam sejarah]

⚔️ PERJUANGAN/KONTRIBUSI:
• [3-4 poin penting tentang perjuangan atau kontribusi]

🎯 WARISAN:
• Dampak: [pengaruh terhadap masa kini]
• Penghargaan: [gelar, monument, atau pengakuan]
• Pelajaran: [nilai yang bisa dipetik]

📅 PERISTIWA PENTING:
• [kronologi peristiwa penting dalam hidupnya]

🏆 FAKTA MENARIK:
• [2-3 fakta unik atau inspiratif]"""


def history_image_prompt() -> str:
    sections = _HISTORY_SECTIONS.format(name_suffix=": [nama lengkap tokoh/peristiwa]")
    return f"""Analisis gambar ini untuk identifikasi tokoh sejarah, pahlawan, ilmuwan, atau peristiwa bersejarah:

{sections}

Kepercayaan: [XX]%

Jawab dengan detail namun mudah dipahami, tanpa format markdown atau simbol bintang."""


def history_text_prompt(query: str) -> str:
    sections = _HISTORY_SECTIONS.format(name_suffix=" lengkap: [nama resmi dan alias]")
    return f"""Berikan informasi lengkap tentang "{query}" dalam konteks sejarah:

{sections}

Jika "{query}" adalah peristiwa sejarah, fokuskan pada latar belakang, kronologi, tokoh yang terlibat, dan dampaknya.

Jawab dengan detail namun mudah dipahami, tanpa format markdown atau simbol bintang."""


def history_fallback_prompt(query: str) -> str:
    return (
        f'Berikan informasi sejarah lengkap tentang "{query}" dengan format yang mudah dipahami. '
        "Sertakan biografi, perjuangan, dan warisan sejarahnya."
    )


def _sentiment(text: str) -> str:
    return f"""Analisis sentimen teks ini dengan format bersih:

😊 SENTIMEN: [POSITIF/NEGATIF/NETRAL]

ANALISIS:
• Skor: [1-10] ([penjelasan singkat])
• Emosi: [emosi dominan yang terdeteksi]
• Indikator: [kata/frasa kunci yang menunjukkan sentimen]

KESIMPULAN:
[1 kalimat ringkasan tentang sentimen teks]

Kepercayaan: [XX]%

Teks: "{text}"

{PLAIN_TEXT_SUFFIX}"""


def _language(text: str) -> str:
    return f"""Deteksi bahasa teks ini dengan format bersih:

🌐 BAHASA: [Nama Bahasa]

ANALISIS:
• Kode: [ISO code]
• Kepercayaan: [XX]%
• Indikator: [kata/frasa yang menunjukkan bahasa ini]

CIRI KHAS:
[1-2 ciri unik bahasa yang terdeteksi]

Teks: "{text}"

{PLAIN_TEXT_SUFFIX}"""


def _keywords(text: str) -> str:
    return f"""Ekstrak kata kunci dari teks ini dengan format bersih:

🔑 KATA KUNCI UTAMA:
1. [kata 1] - [relevansi]
2. [kata 2] - [relevansi]
3. [kata 3] - [relevansi]
4. [kata 4] - [relevansi]
5. [kata 5] - [relevansi]

TEMA: [tema utama teks]
KATEGORI: [kategori/bidang teks]

Teks: "{text}"

{PLAIN_TEXT_SUFFIX}"""


def _fact_argument(text: str) -> str:
    return f"""Analisis teks ini untuk menentukan apakah berupa fakta atau argumen:

📊 JENIS: [FAKTA / ARGUMEN / CAMPURAN]

ANALISIS:
• Klasifikasi: [pernyataan objektif/subjektif]
• Bukti: [ada data pendukung/berdasarkan opini]
• Sifat: [dapat diverifikasi/bersifat persuasif]

PENJELASAN:
[1-2 kalimat mengapa dikategorikan sebagai fakta atau argumen]

INDIKATOR:
• [kata/frasa yang menunjukkan fakta atau argumen]

KEPERCAYAAN: [XX]%

Teks: "{text}"

{PLAIN_TEXT_SUFFIX}"""


_TEXT_BUILDERS = {
    "sentiment": _sentiment,
    "language": _language,
    "keywords": _keywords,
    "factargument": _fact_argument,
}


def text_analysis_prompt(text: str, analysis_type: str) -> str:
    """Build the prompt for one of the TEXT_ANALYSIS_TYPES."""
    builder = _TEXT_BUILDERS.get(analysis_type)
    if builder is None:
        raise InvalidInputError(f"Jenis analisis tidak dikenal: {analysis_type}")
    return builder(text)


def image_prompt(kind: str, food: str | None = None) -> str:
    """Pick the image prompt for a detection kind (animal, plant, medicinal, history)."""
    if kind == "animal":
        if not food or not food.strip():
            raise InvalidInputError("Silakan upload gambar dan masukkan jenis makanan!")
        return animal_prompt(food.strip())
    if kind == "plant":
        return plant_prompt()
    if kind == "medicinal":
        return medicinal_plant_prompt()
    if kind == "history":
        return history_image_prompt()
    raise InvalidInputError(f"Jenis deteksi tidak dikenal: {kind}")
