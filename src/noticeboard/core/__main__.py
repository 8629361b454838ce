"""CLI 入口模块 -- python -m noticeboard.core <command>

支持的命令：
  init-db                  初始化 SQLite 数据库结构
  list <organization_id>   列出组织内全部消息
"""

import asyncio
import sys

from .config import get_db_path


def main() -> None:
    """CLI 主入口"""
    if len(sys.argv) < 2:
        print("用法: python -m noticeboard.core <command>")
        print("命令:")
        print("  init-db                  初始化 SQLite 数据库结构")
        print("  list <organization_id>   列出组织内全部消息")
        sys.exit(1)

    command = sys.argv[1]

    if command == "init-db":
        asyncio.run(init_database())
    elif command == "list":
        if len(sys.argv) < 3:
            print("用法: python -m noticeboard.core list <organization_id>")
            sys.exit(1)
        asyncio.run(list_messages(sys.argv[2]))
    else:
        print(f"未知命令: {command}")
        print("可用命令: init-db, list")
        sys.exit(1)


async def init_database() -> None:
    """创建/补齐数据库表与索引"""
    from .store import create_store_group

    db_path = get_db_path()
    print(f"数据库路径: {db_path}")

    store_group = await create_store_group(db_path)
    await store_group.conn.close()
    print("初始化完成")


async def list_messages(organization_id: str) -> None:
    """打印组织内全部消息"""
    from .store import create_store_group

    store_group = await create_store_group(get_db_path())

    try:
        messages = await store_group.message_store.list_by_organization(organization_id)
        for m in messages:
            state = "active" if m.is_active else "inactive"
            print(f"{m.id}  [{state}]  {m.title}")
        print(f"共 {len(messages)} 条消息")
    finally:
        await store_group.conn.close()


if __name__ == "__main__":
    main()
