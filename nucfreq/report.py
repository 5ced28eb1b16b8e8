from nucfreq.core.nucleotide import NUCLEOTIDES


def build_report_row(record_id, counts, normalized):
    row = {
        "id": record_id,
        "length": counts.length,
        "total": counts.total,
    }
    for n in NUCLEOTIDES:
        row[f"count_{n.value}"] = counts[n]
    for n in NUCLEOTIDES:
        row[f"freq_{n.value}"] = f"{normalized[n]:.5f}"
    row["max"] = "|".join(n.value for n, _ in normalized.max())
    row["entropy_bits"] = f"{normalized.entropy():.5f}"
    return row


def format_report(row):
    return "\n".join(f"{k}\t{v}" for k, v in row.items())
