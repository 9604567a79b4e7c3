from zenhan.tables import (
    Direction,
    HiraKana,
    Target,
    build_hira_kana_mapping,
    build_mapping,
)

# number of entries printed per table
SAMPLES = 5


def show(label: str, table: dict) -> None:
    items = list(table.items())[:SAMPLES]
    sample = ", ".join(f"{chr(k)}->{v}" for k, v in items)
    print(f"{label}: {len(table)} entries")
    print(f"  {sample}")


def main():
    for direction in Direction:
        for target in Target:
            show(f"{direction.value} {target.name}", build_mapping(direction, target))
        print('-'*40)
    for kind in HiraKana:
        show(kind.value, build_hira_kana_mapping(kind))


if __name__ == '__main__':
    main()
